# app/services/call_service.py
import logging
import time
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.errors import persistence_error
from app.models.customer_models import Call, Customer
from app.schemas.customer_schemas import CallCreate, CallOut

logger = logging.getLogger(__name__)


async def list_calls(db: AsyncSession, customer_id: Optional[int] = None) -> List[CallOut]:
    stmt = select(Call).order_by(Call.call_time.desc(), Call.id.desc())
    if customer_id is not None:
        stmt = stmt.where(Call.customer_id == customer_id)
    result = await db.execute(stmt)
    return [CallOut.model_validate(c) for c in result.scalars().all()]


async def create_call(db: AsyncSession, data: CallCreate, current_user) -> CallOut:
    if await db.get(Customer, data.customer_id) is None:
        raise HTTPException(status_code=404, detail=f"Customer {data.customer_id} not found")
    if not data.subject.strip():
        raise HTTPException(status_code=400, detail="Subject is required")

    try:
        call = Call(
            customer_id=data.customer_id,
            subject=data.subject,
            description=data.description,
            call_time=data.call_time if data.call_time is not None else int(time.time()),
            created_by=current_user.username,
        )
        db.add(call)
        await db.commit()
        await db.refresh(call)
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to record call", e))
    logger.info("%s logged call %s for customer %s", current_user.username, call.id, call.customer_id)
    return CallOut.model_validate(call)


async def delete_call(db: AsyncSession, call_id: int) -> dict:
    call = await db.get(Call, call_id)
    if not call:
        raise HTTPException(status_code=404, detail="Call not found")
    try:
        await db.delete(call)
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to delete call", e))
    logger.info("Call %s deleted", call_id)
    return {"message": "Call deleted successfully"}
