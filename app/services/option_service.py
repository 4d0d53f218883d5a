# app/services/option_service.py
import json
import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.errors import persistence_error
from app.models.order_models import OrderItemOption
from app.models.product_models import MULTI_STATE_MODELS, Option
from app.schemas.product_schemas import OptionOut, OptionPayload

logger = logging.getLogger(__name__)


def _clean_states(model: str, states: Optional[List[str]]) -> Optional[str]:
    """Multi-state options keep their trimmed, non-blank states as JSON text."""
    if model not in MULTI_STATE_MODELS:
        return None
    cleaned = [s.strip() for s in (states or []) if s and s.strip()]
    if not cleaned:
        raise HTTPException(status_code=400, detail="At least one state is required for multi-state options")
    return json.dumps(cleaned, ensure_ascii=False)


def _validate(data: OptionPayload) -> None:
    if not data.title or not data.title.strip():
        raise HTTPException(status_code=400, detail="Option title is required")
    if not data.model or not data.model.strip():
        raise HTTPException(status_code=400, detail="Option model is required")


async def _get(db: AsyncSession, option_id: int) -> Option:
    option = await db.get(Option, option_id)
    if not option:
        raise HTTPException(status_code=404, detail="Option not found")
    return option


# --------------------------
# LIST / GET
# --------------------------
async def list_options(db: AsyncSession) -> List[OptionOut]:
    result = await db.execute(select(Option).order_by(Option.id.desc()))
    return [OptionOut.model_validate(o) for o in result.scalars().all()]


async def get_option(db: AsyncSession, option_id: int) -> OptionOut:
    return OptionOut.model_validate(await _get(db, option_id))


# --------------------------
# CREATE
# --------------------------
async def create_option(db: AsyncSession, data: OptionPayload) -> OptionOut:
    _validate(data)
    states = _clean_states(data.model, data.states)
    try:
        option = Option(
            title=data.title.strip(),
            model=data.model,
            states=states,
            description=data.description,
            is_active=True if data.is_active is None else data.is_active,
        )
        db.add(option)
        await db.commit()
        await db.refresh(option)
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to create option", e))

    logger.info("Option %s (%s) created", option.id, option.model)
    return OptionOut.model_validate(option)


# --------------------------
# UPDATE
# --------------------------
async def update_option(db: AsyncSession, option_id: int, data: OptionPayload) -> OptionOut:
    option = await _get(db, option_id)
    _validate(data)
    states = _clean_states(data.model, data.states)
    try:
        option.title = data.title.strip()
        option.model = data.model
        option.states = states
        option.description = data.description
        if data.is_active is not None:
            option.is_active = data.is_active
        await db.commit()
        await db.refresh(option)
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to update option", e))
    return OptionOut.model_validate(option)


# --------------------------
# DELETE
# --------------------------
async def delete_option(db: AsyncSession, option_id: int) -> dict:
    option = await _get(db, option_id)

    in_use = await db.execute(select(OrderItemOption.id).where(OrderItemOption.option_id == option_id).limit(1))
    if in_use.first() is not None:
        raise HTTPException(status_code=409, detail="Option is used by existing orders and cannot be deleted")

    try:
        await db.delete(option)
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to delete option", e))

    logger.info("Option %s deleted", option_id)
    return {"message": "Option deleted successfully"}
