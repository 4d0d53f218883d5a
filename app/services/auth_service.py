# app/services/auth_service.py
import logging

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.config import Settings
from app.core.errors import persistence_error
from app.core.security import create_access_token, hash_password, verify_password
from app.models.user_models import User
from app.schemas.user_schemas import LoginResponse, LoginUser

logger = logging.getLogger(__name__)


async def authenticate_user(db: AsyncSession, username: str, password: str) -> User:
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalars().first()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
    if not user.enabled:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Your account is disabled")
    if not verify_password(password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
    return user


async def login(db: AsyncSession, username: str, password: str, settings: Settings) -> LoginResponse:
    user = await authenticate_user(db, username, password)
    token = create_access_token(
        {"sub": user.username, "id": user.id, "role": user.role},
        settings,
    )
    logger.info("User %s logged in", user.username)
    return LoginResponse(token=token, user=LoginUser.model_validate(user), result=True)


async def change_password(db: AsyncSession, current_user: User, password: str, new_password: str) -> dict:
    if not verify_password(password, current_user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Current password is incorrect")
    if len(new_password) < 4:
        raise HTTPException(status_code=400, detail="New password must be at least 4 characters")

    try:
        current_user.password_hash = hash_password(new_password)
        db.add(current_user)
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to change password", e))

    return {"message": "Password changed successfully"}
