# app/models/product_models.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.db import Base

# Option models that carry a list of selectable states
MULTI_STATE_MODELS = ("multiState", "countableMultiState")


# --------------------------
# Option
# --------------------------
class Option(Base):
    __tablename__ = "options"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    model = Column(String, nullable=False)
    states = Column(Text, nullable=True)  # JSON list, only for multi-state models
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


# --------------------------
# Product
# --------------------------
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    product_options = relationship(
        "ProductOption",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ProductOption.id",
    )


class ProductOption(Base):
    __tablename__ = "product_options"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    option_id = Column(Integer, ForeignKey("options.id", ondelete="CASCADE"), nullable=False, index=True)
    max_no = Column(Integer, nullable=True)

    product = relationship("Product", back_populates="product_options")
    option = relationship("Option")
