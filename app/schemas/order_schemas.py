# app/schemas/order_schemas.py
from typing import Any, Dict, List, Optional
from datetime import datetime

from app.schemas.product_schemas import OptionOut
from app.schemas.response_schemas import CamelModel
from app.utils.selection import Selection


# --------------------------
# Request payloads
# --------------------------
class OrderItemOptionIn(CamelModel):
    product_option_id: int
    selection: Selection = None


class OrderItemIn(CamelModel):
    product_id: int
    quantity: int
    description: Optional[str] = None
    order_item_product_options: List[OrderItemOptionIn] = []


class OrderPayload(CamelModel):
    """
    Body of POST /api/orders and PUT /api/orders/{id}.
    customerId and orderItems are checked by the service so that a missing
    value is reported with its own message.
    """
    customer_id: Optional[int] = None
    company_id: Optional[int] = None
    description: Optional[str] = None
    status: Optional[str] = None
    order_items: Optional[List[OrderItemIn]] = None


# --------------------------
# Order graph
# --------------------------
class OrderItemOptionOut(CamelModel):
    id: int
    product_option_id: int
    selection: str
    option: Optional[OptionOut] = None


class OrderItemOut(CamelModel):
    id: int
    product_id: int
    product_name: Optional[str] = None
    quantity: int
    description: Optional[str] = None
    order_item_product_options: List[OrderItemOptionOut] = []


class OrderOut(CamelModel):
    id: int
    customer_id: int
    customer_name: Optional[str] = None
    company_id: Optional[int] = None
    username: Optional[str] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    description: str = ""
    status: str
    order_time: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    order_items: List[OrderItemOut] = []


# --------------------------
# History
# --------------------------
class OrderHistoryOut(CamelModel):
    id: int
    order_id: int
    action: str
    changed_by: Optional[str] = None
    changed_at: datetime
    old_data: Optional[Dict[str, Any]] = None
    new_data: Dict[str, Any]
    changes: Optional[Dict[str, Any]] = None
