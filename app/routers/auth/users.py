# app/routers/auth/users.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.response_schemas import MessageResponse
from app.schemas.user_schemas import UserCreate, UserOut, UserUpdate
from app.services.user_service import (
    create_user, list_users, get_user_by_id, update_user,
    delete_user
)
from app.utils.check_roles import require_role
from app.utils.get_user import get_current_user

router = APIRouter(prefix="/api/users", tags=["Users"])


# ---------------------------
# CREATE USER
# ---------------------------
@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
@require_role(["admin"])
async def create_user_route(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await create_user(db, user_data, _user)


# ---------------------------
# LIST ALL USERS
# ---------------------------
@router.get("", response_model=List[UserOut])
@require_role(["admin"])
async def list_users_route(db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await list_users(db)


# ---------------------------
# GET SINGLE USER
# ---------------------------
@router.get("/{user_id}", response_model=UserOut)
@require_role(["admin"])
async def get_user_route(user_id: int, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await get_user_by_id(db, user_id)


# ---------------------------
# UPDATE USER
# ---------------------------
@router.put("/{user_id}", response_model=UserOut)
@require_role(["admin"])
async def update_user_route(user_id: int, user_data: UserUpdate, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await update_user(db, user_id, user_data, _user)


# ---------------------------
# DELETE USER
# ---------------------------
@router.delete("/{user_id}", response_model=MessageResponse)
@require_role(["admin"])
async def delete_user_route(user_id: int, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await delete_user(db, user_id, _user)
