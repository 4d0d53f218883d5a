# app/services/order_service.py
import logging
import time
from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.core.errors import persistence_error
from app.models.customer_models import Company, Customer
from app.models.order_models import Order, OrderItem, OrderItemOption
from app.models.product_models import Option, Product
from app.schemas.order_schemas import (
    OrderPayload,
    OrderItemIn,
    OrderOut,
    OrderItemOut,
    OrderItemOptionOut,
)
from app.schemas.product_schemas import OptionOut
from app.services import order_history_service
from app.utils.selection import normalize_selection

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "open"


# --------------------------
# Helpers: loading and shaping the order graph
# --------------------------
def _graph_query():
    return select(Order).options(
        selectinload(Order.customer),
        selectinload(Order.order_items).selectinload(OrderItem.product),
        selectinload(Order.order_items)
        .selectinload(OrderItem.selections)
        .selectinload(OrderItemOption.option),
    )


async def load_order_graph(db: AsyncSession, order_id: int) -> Optional[Order]:
    result = await db.execute(
        _graph_query()
        .where(Order.id == order_id)
        .execution_options(populate_existing=True)
    )
    return result.scalars().first()


def to_order_out(order: Order) -> OrderOut:
    return OrderOut(
        id=order.id,
        customer_id=order.customer_id,
        customer_name=order.customer.name if order.customer else None,
        company_id=order.company_id,
        username=order.created_by,
        created_by=order.created_by,
        updated_by=order.updated_by,
        description=order.description or "",
        status=order.status,
        order_time=order.order_time,
        created_at=order.created_at,
        updated_at=order.updated_at,
        order_items=[
            OrderItemOut(
                id=item.id,
                product_id=item.product_id,
                product_name=item.product.name if item.product else None,
                quantity=item.quantity,
                description=item.description,
                order_item_product_options=[
                    OrderItemOptionOut(
                        id=sel.id,
                        product_option_id=sel.option_id,
                        selection=sel.selection,
                        option=OptionOut.model_validate(sel.option) if sel.option else None,
                    )
                    for sel in item.selections
                ],
            )
            for item in order.order_items
        ],
    )


def snapshot(order_out: OrderOut) -> Dict[str, Any]:
    """JSON-ready camelCase form of an order graph, as stored in history."""
    return order_out.model_dump(mode="json", by_alias=True)


# --------------------------
# Helpers: validation
# --------------------------
def validate_order_payload(data: OrderPayload) -> None:
    if not data.customer_id:
        raise HTTPException(status_code=400, detail="customerId is required")
    if not data.order_items:
        raise HTTPException(status_code=400, detail="At least one product must be selected")
    for index, item in enumerate(data.order_items):
        if item.quantity < 1:
            raise HTTPException(
                status_code=400,
                detail=f"Item {index + 1}: quantity must be a positive integer",
            )


async def _missing_ids(db: AsyncSession, model, ids: set) -> List[int]:
    if not ids:
        return []
    result = await db.execute(select(model.id).where(model.id.in_(ids)))
    found = set(result.scalars().all())
    return sorted(ids - found)


async def check_order_references(db: AsyncSession, data: OrderPayload) -> None:
    """404 for any referenced customer, company, product or option that does not exist."""
    if await db.get(Customer, data.customer_id) is None:
        raise HTTPException(status_code=404, detail=f"Customer {data.customer_id} not found")

    if data.company_id is not None and await db.get(Company, data.company_id) is None:
        raise HTTPException(status_code=404, detail=f"Company {data.company_id} not found")

    product_ids = {item.product_id for item in data.order_items}
    missing = await _missing_ids(db, Product, product_ids)
    if missing:
        raise HTTPException(status_code=404, detail=f"Product {missing[0]} not found")

    option_ids = {
        opt.product_option_id
        for item in data.order_items
        for opt in item.order_item_product_options
    }
    missing = await _missing_ids(db, Option, option_ids)
    if missing:
        raise HTTPException(status_code=404, detail=f"Option {missing[0]} not found")


def build_order_items(items: List[OrderItemIn]) -> List[OrderItem]:
    return [
        OrderItem(
            product_id=item.product_id,
            quantity=item.quantity,
            description=item.description or "",
            selections=[
                OrderItemOption(
                    option_id=opt.product_option_id,
                    selection=normalize_selection(opt.selection),
                )
                for opt in item.order_item_product_options
            ],
        )
        for item in items
    ]


# =====================================================
# 🔹 LIST ORDERS
# =====================================================
async def list_orders(db: AsyncSession) -> List[OrderOut]:
    result = await db.execute(_graph_query().order_by(Order.id.desc()))
    return [to_order_out(order) for order in result.scalars().all()]


# =====================================================
# 🔹 GET ORDER
# =====================================================
async def get_order(db: AsyncSession, order_id: int) -> OrderOut:
    order = await load_order_graph(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return to_order_out(order)


# =====================================================
# 🔹 CREATE ORDER
# =====================================================
async def create_order(db: AsyncSession, data: OrderPayload, current_user) -> OrderOut:
    validate_order_payload(data)
    await check_order_references(db, data)

    try:
        order = Order(
            customer_id=data.customer_id,
            company_id=data.company_id,
            description=data.description or "",
            status=data.status or DEFAULT_STATUS,
            order_time=int(time.time()),
            created_by=current_user.username,
            order_items=build_order_items(data.order_items),
        )
        db.add(order)
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error("Failed to create order for customer %s: %s", data.customer_id, e)
        raise HTTPException(status_code=500, detail=persistence_error("Failed to create order", e))

    order_out = to_order_out(await load_order_graph(db, order.id))
    logger.info("Order %s created by %s", order_out.id, current_user.username)

    await order_history_service.record_order_history(
        db,
        order_id=order_out.id,
        action=order_history_service.CREATED,
        changed_by=current_user.username,
        old_data=None,
        new_data=snapshot(order_out),
    )
    return order_out


# =====================================================
# 🔹 UPDATE ORDER (items are replaced, not merged)
# =====================================================
async def update_order(db: AsyncSession, order_id: int, data: OrderPayload, current_user) -> OrderOut:
    validate_order_payload(data)

    order = await load_order_graph(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    old_snapshot = snapshot(to_order_out(order))

    await check_order_references(db, data)

    new_status = data.status or DEFAULT_STATUS
    try:
        order.customer_id = data.customer_id
        if data.company_id is not None:
            order.company_id = data.company_id
        order.description = data.description or ""
        order.status = new_status
        order.updated_by = current_user.username
        # orphaned items and their selections are deleted on flush
        order.order_items = build_order_items(data.order_items)
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error("Failed to update order %s: %s", order_id, e)
        raise HTTPException(status_code=500, detail=persistence_error("Failed to update order", e))

    order_out = to_order_out(await load_order_graph(db, order_id))
    logger.info("Order %s updated by %s", order_id, current_user.username)

    if old_snapshot["status"] != new_status:
        action = order_history_service.STATUS_CHANGED
    else:
        action = order_history_service.UPDATED
    await order_history_service.record_order_history(
        db,
        order_id=order_id,
        action=action,
        changed_by=current_user.username,
        old_data=old_snapshot,
        new_data=snapshot(order_out),
    )
    return order_out


# =====================================================
# 🔹 DELETE ORDER (no history row; history cascades away)
# =====================================================
async def delete_order(db: AsyncSession, order_id: int, current_user) -> dict:
    order = await db.get(Order, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")

    try:
        await db.delete(order)
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error("Failed to delete order %s: %s", order_id, e)
        raise HTTPException(status_code=500, detail=persistence_error("Failed to delete order", e))

    logger.info("Order %s deleted by %s", order_id, current_user.username)
    return {"message": "Order deleted successfully"}
