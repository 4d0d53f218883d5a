# app/services/order_history_service.py
import json
import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models.order_models import OrderHistory
from app.schemas.order_schemas import OrderHistoryOut
from app.utils.order_diff import diff_order_snapshots

logger = logging.getLogger(__name__)

CREATED = "created"
UPDATED = "updated"
STATUS_CHANGED = "status_changed"


def _dumps(data: Optional[Dict[str, Any]]) -> Optional[str]:
    return json.dumps(data, ensure_ascii=False) if data is not None else None


def _loads(text: Optional[str]) -> Optional[Any]:
    return json.loads(text) if text else None


# ---------------------------
# RECORD HISTORY (best effort)
# ---------------------------
async def record_order_history(
    db: AsyncSession,
    order_id: int,
    action: str,
    changed_by: Optional[str],
    old_data: Optional[Dict[str, Any]],
    new_data: Dict[str, Any],
) -> Optional[OrderHistory]:
    """
    Append one audit row in its own transaction. The order mutation has
    already been committed, so a failure here is logged and swallowed and
    the caller still reports success.
    """
    try:
        entry = OrderHistory(
            order_id=order_id,
            action=action,
            changed_by=changed_by,
            old_data=_dumps(old_data),
            new_data=_dumps(new_data),
            changes=_dumps(diff_order_snapshots(old_data, new_data)),
        )
        db.add(entry)
        await db.commit()
        return entry
    except Exception:
        await db.rollback()
        logger.exception("Failed to write %s history for order %s", action, order_id)
        return None


# ---------------------------
# READ HISTORY
# ---------------------------
async def get_order_history(db: AsyncSession, order_id: int) -> List[OrderHistoryOut]:
    """
    History rows for an order, newest first.
    """
    if order_id < 1:
        raise HTTPException(status_code=400, detail="Invalid order id")

    result = await db.execute(
        select(OrderHistory)
        .where(OrderHistory.order_id == order_id)
        .order_by(OrderHistory.changed_at.desc(), OrderHistory.id.desc())
    )
    return [
        OrderHistoryOut(
            id=h.id,
            order_id=h.order_id,
            action=h.action,
            changed_by=h.changed_by,
            changed_at=h.changed_at,
            old_data=_loads(h.old_data),
            new_data=_loads(h.new_data),
            changes=_loads(h.changes),
        )
        for h in result.scalars().all()
    ]
