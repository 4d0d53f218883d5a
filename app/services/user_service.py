# app/services/user_service.py
import logging
from typing import List

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.errors import persistence_error
from app.core.security import hash_password
from app.models.user_models import ROLES, User
from app.schemas.user_schemas import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


def _check_role(role: str) -> None:
    if role not in ROLES:
        raise HTTPException(status_code=400, detail=f"Role must be one of {', '.join(ROLES)}")


# ---------------------------
# CREATE USER
# ---------------------------
async def create_user(db: AsyncSession, user_data: UserCreate, current_user) -> User:
    existing = await db.execute(select(User).where(User.username == user_data.username))
    if existing.scalars().first():
        raise HTTPException(status_code=409, detail="Username is already taken")
    _check_role(user_data.role)

    try:
        new_user = User(
            username=user_data.username,
            password_hash=hash_password(user_data.password),
            name=user_data.name,
            role=user_data.role,
            enabled=user_data.enabled,
        )
        db.add(new_user)
        await db.commit()
        await db.refresh(new_user)
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to create user", e))

    logger.info("%s created user %s (%s)", current_user.username, new_user.username, new_user.role)
    return new_user


# ---------------------------
# LIST ALL USERS
# ---------------------------
async def list_users(db: AsyncSession) -> List[User]:
    result = await db.execute(select(User).order_by(User.id))
    return result.scalars().all()


# ---------------------------
# GET USER BY ID
# ---------------------------
async def get_user_by_id(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


# ---------------------------
# UPDATE USER
# ---------------------------
async def update_user(db: AsyncSession, user_id: int, user_data: UserUpdate, current_user) -> User:
    target_user = await get_user_by_id(db, user_id)

    if user_data.role is not None:
        _check_role(user_data.role)
        target_user.role = user_data.role
    if user_data.name is not None:
        target_user.name = user_data.name
    if user_data.enabled is not None:
        target_user.enabled = user_data.enabled
    if user_data.password:
        target_user.password_hash = hash_password(user_data.password)

    try:
        await db.commit()
        await db.refresh(target_user)
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to update user", e))

    logger.info("%s updated user %s", current_user.username, target_user.username)
    return target_user


# ---------------------------
# DELETE USER
# ---------------------------
async def delete_user(db: AsyncSession, user_id: int, current_user) -> dict:
    target_user = await get_user_by_id(db, user_id)
    if target_user.id == current_user.id:
        raise HTTPException(status_code=400, detail="You cannot delete your own account")

    try:
        await db.delete(target_user)
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to delete user", e))

    logger.info("%s deleted user %s", current_user.username, target_user.username)
    return {"message": "User deleted successfully"}
