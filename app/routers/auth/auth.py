# app/routers/auth/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.db import get_db
from app.schemas.user_schemas import LoginResponse, UserLogin
from app.services import auth_service
from app.utils.get_user import get_settings

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    data: UserLogin,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return await auth_service.login(db, data.username, data.password, settings)
