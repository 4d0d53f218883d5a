from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.customer_schemas import CallCreate, CallOut
from app.schemas.response_schemas import MessageResponse
from app.services import call_service
from app.utils.check_roles import ALL_ROLES, STAFF_ROLES, require_role
from app.utils.get_user import get_current_user

router = APIRouter(prefix="/calls", tags=["Calls"])


@router.get("", response_model=List[CallOut])
@require_role(ALL_ROLES)
async def list_calls_route(
    customer_id: Optional[int] = Query(None, alias="customerId"),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await call_service.list_calls(db, customer_id)


@router.post("", response_model=CallOut)
@require_role(ALL_ROLES)
async def create_call_route(call: CallCreate, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await call_service.create_call(db, call, _user)


@router.delete("/{call_id}", response_model=MessageResponse)
@require_role(STAFF_ROLES)
async def delete_call_route(call_id: int, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await call_service.delete_call(db, call_id)
