# --------------------------
# File: app/services/product_service.py
# Description: Product CRUD; a product carries the options an order item may select
# --------------------------

import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.core.errors import persistence_error
from app.models.order_models import OrderItem
from app.models.product_models import Option, Product, ProductOption
from app.schemas.product_schemas import ProductOptionIn, ProductOut, ProductPayload

logger = logging.getLogger(__name__)


def _query():
    return select(Product).options(
        selectinload(Product.product_options).selectinload(ProductOption.option)
    )


async def _load(db: AsyncSession, product_id: int) -> Optional[Product]:
    result = await db.execute(
        _query().where(Product.id == product_id).execution_options(populate_existing=True)
    )
    return result.scalars().first()


async def _build_product_options(db: AsyncSession, entries: List[ProductOptionIn]) -> List[ProductOption]:
    """Every referenced option must exist."""
    rows = []
    for entry in entries:
        if await db.get(Option, entry.option_id) is None:
            raise HTTPException(status_code=404, detail=f"Option {entry.option_id} not found")
        rows.append(ProductOption(option_id=entry.option_id, max_no=entry.max_no))
    return rows


# --------------------------
# LIST / GET
# --------------------------
async def list_products(db: AsyncSession) -> List[ProductOut]:
    result = await db.execute(_query().order_by(Product.id.desc()))
    return [ProductOut.model_validate(p) for p in result.scalars().all()]


async def get_product(db: AsyncSession, product_id: int) -> ProductOut:
    product = await _load(db, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductOut.model_validate(product)


# --------------------------
# CREATE PRODUCT
# --------------------------
async def create_product(db: AsyncSession, data: ProductPayload, current_user) -> ProductOut:
    if not data.name or not data.name.strip():
        raise HTTPException(status_code=400, detail="Product name is required")
    product_options = await _build_product_options(db, data.product_options or [])

    try:
        product = Product(
            name=data.name.strip(),
            description=data.description,
            product_options=product_options,
        )
        db.add(product)
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to create product", e))

    logger.info("%s created product '%s' (ID: %s)", current_user.username, product.name, product.id)
    return await get_product(db, product.id)


# --------------------------
# UPDATE PRODUCT (productOptions, when given, replace the stored set)
# --------------------------
async def update_product(db: AsyncSession, product_id: int, data: ProductPayload, current_user) -> ProductOut:
    product = await _load(db, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    if data.name is not None and not data.name.strip():
        raise HTTPException(status_code=400, detail="Product name is required")

    product_options = None
    if data.product_options is not None:
        product_options = await _build_product_options(db, data.product_options)

    try:
        if data.name is not None:
            product.name = data.name.strip()
        if data.description is not None:
            product.description = data.description
        if product_options is not None:
            product.product_options = product_options
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to update product", e))

    logger.info("%s updated product %s", current_user.username, product_id)
    return await get_product(db, product_id)


# --------------------------
# DELETE PRODUCT
# --------------------------
async def delete_product(db: AsyncSession, product_id: int, current_user) -> dict:
    product = await db.get(Product, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    in_use = await db.execute(select(OrderItem.id).where(OrderItem.product_id == product_id).limit(1))
    if in_use.first() is not None:
        raise HTTPException(status_code=409, detail="Product is used by existing orders and cannot be deleted")

    try:
        await db.delete(product)
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to delete product", e))

    logger.info("%s deleted product %s", current_user.username, product_id)
    return {"message": "Product deleted successfully"}
