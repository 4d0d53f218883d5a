# app/routers/orders_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.order_schemas import OrderHistoryOut, OrderOut, OrderPayload
from app.schemas.response_schemas import MessageResponse
from app.services import order_history_service, order_service
from app.utils.check_roles import ALL_ROLES, STAFF_ROLES, require_role
from app.utils.get_user import get_current_user

router = APIRouter(prefix="/api/orders", tags=["Orders"])


# =====================================================
# 🔹 LIST ORDERS
# =====================================================
@router.get("", response_model=List[OrderOut])
async def list_orders_route(db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await order_service.list_orders(db)


# =====================================================
# 🔹 GET ORDER
# =====================================================
@router.get("/{order_id}", response_model=OrderOut)
async def get_order_route(order_id: int, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await order_service.get_order(db, order_id)


# =====================================================
# 🔹 ORDER HISTORY (newest first)
# =====================================================
@router.get("/{order_id}/history", response_model=List[OrderHistoryOut])
@require_role(ALL_ROLES)
async def order_history_route(order_id: int, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await order_history_service.get_order_history(db, order_id)


# =====================================================
# 🔹 CREATE ORDER
# =====================================================
@router.post("", response_model=OrderOut)
@require_role(ALL_ROLES)
async def create_order_route(
    data: OrderPayload,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await order_service.create_order(db, data, _user)


# =====================================================
# 🔹 UPDATE ORDER
# =====================================================
@router.put("/{order_id}", response_model=OrderOut)
@require_role(ALL_ROLES)
async def update_order_route(
    order_id: int,
    data: OrderPayload,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await order_service.update_order(db, order_id, data, _user)


# =====================================================
# 🔹 DELETE ORDER
# =====================================================
@router.delete("/{order_id}", response_model=MessageResponse)
@require_role(STAFF_ROLES)
async def delete_order_route(order_id: int, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await order_service.delete_order(db, order_id, _user)
