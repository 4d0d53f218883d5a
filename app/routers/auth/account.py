# app/routers/auth/account.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.response_schemas import MessageResponse
from app.schemas.user_schemas import ChangePassword
from app.services import auth_service
from app.utils.get_user import get_current_user

router = APIRouter(prefix="/api/account", tags=["Account"])


@router.post("/change-password", response_model=MessageResponse)
async def change_password(
    data: ChangePassword,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return await auth_service.change_password(db, current_user, data.password, data.new_password)
