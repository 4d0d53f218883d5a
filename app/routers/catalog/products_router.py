# app/routers/catalog/products_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.product_schemas import ProductOut, ProductPayload
from app.schemas.response_schemas import MessageResponse
from app.services import product_service
from app.utils.check_roles import ALL_ROLES, STAFF_ROLES, require_role
from app.utils.get_user import get_current_user

router = APIRouter(prefix="/products", tags=["Products"])


# ---------------------------
# CREATE PRODUCT
# ---------------------------
@router.post("", response_model=ProductOut)
@require_role(STAFF_ROLES)
async def create_product_route(
    product: ProductPayload,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await product_service.create_product(db, product, _user)


# ---------------------------
# LIST PRODUCTS
# ---------------------------
@router.get("", response_model=List[ProductOut])
@require_role(ALL_ROLES)
async def list_products_route(db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await product_service.list_products(db)


# ---------------------------
# GET PRODUCT
# ---------------------------
@router.get("/{product_id}", response_model=ProductOut)
@require_role(ALL_ROLES)
async def get_product_route(product_id: int, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await product_service.get_product(db, product_id)


# ---------------------------
# UPDATE PRODUCT
# ---------------------------
@router.put("/{product_id}", response_model=ProductOut)
@require_role(STAFF_ROLES)
async def update_product_route(
    product_id: int,
    product: ProductPayload,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await product_service.update_product(db, product_id, product, _user)


# ---------------------------
# DELETE PRODUCT
# ---------------------------
@router.delete("/{product_id}", response_model=MessageResponse)
@require_role(STAFF_ROLES)
async def delete_product_route(product_id: int, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await product_service.delete_product(db, product_id, _user)
