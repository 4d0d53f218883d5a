# app/models/order_models.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.db import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="SET NULL"), nullable=True)
    description = Column(Text, nullable=False, default="")
    status = Column(String, nullable=False, default="open")
    order_time = Column(Integer, nullable=False)  # seconds since epoch, set once on create

    created_by = Column(String, nullable=True)
    updated_by = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    customer = relationship("Customer")
    order_items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderItem.id",
    )
    history = relationship("OrderHistory", back_populates="order", cascade="all, delete-orphan", passive_deletes=True)


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)

    order = relationship("Order", back_populates="order_items")
    product = relationship("Product")
    selections = relationship(
        "OrderItemOption",
        back_populates="order_item",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderItemOption.id",
    )


class OrderItemOption(Base):
    __tablename__ = "order_item_options"

    id = Column(Integer, primary_key=True, index=True)
    order_item_id = Column(Integer, ForeignKey("order_items.id", ondelete="CASCADE"), nullable=False, index=True)
    option_id = Column(Integer, ForeignKey("options.id"), nullable=False)
    selection = Column(Text, nullable=False, default="")

    order_item = relationship("OrderItem", back_populates="selections")
    option = relationship("Option")


class OrderHistory(Base):
    """Audit row written once per order create/update. Never updated."""
    __tablename__ = "order_history"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    action = Column(String, nullable=False)  # created | updated | status_changed
    changed_by = Column(String, nullable=True)
    changed_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    old_data = Column(Text, nullable=True)
    new_data = Column(Text, nullable=False)
    changes = Column(Text, nullable=True)

    order = relationship("Order", back_populates="history")
