from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.product_schemas import OptionOut, OptionPayload
from app.schemas.response_schemas import MessageResponse
from app.services import option_service
from app.utils.check_roles import ALL_ROLES, STAFF_ROLES, require_role
from app.utils.get_user import get_current_user

router = APIRouter(prefix="/options", tags=["Options"])


@router.get("", response_model=List[OptionOut])
@require_role(ALL_ROLES)
async def list_options_route(db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await option_service.list_options(db)


@router.get("/{option_id}", response_model=OptionOut)
@require_role(ALL_ROLES)
async def get_option_route(option_id: int, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await option_service.get_option(db, option_id)


@router.post("", response_model=OptionOut)
@require_role(STAFF_ROLES)
async def create_option_route(option: OptionPayload, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await option_service.create_option(db, option)


@router.put("/{option_id}", response_model=OptionOut)
@require_role(STAFF_ROLES)
async def update_option_route(
    option_id: int,
    option: OptionPayload,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await option_service.update_option(db, option_id, option)


@router.delete("/{option_id}", response_model=MessageResponse)
@require_role(STAFF_ROLES)
async def delete_option_route(option_id: int, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await option_service.delete_option(db, option_id)
