# app/schemas/product_schemas.py
import json
from typing import List, Optional
from datetime import datetime

from pydantic import field_validator

from app.schemas.response_schemas import CamelModel


# --------------------------
# Option Schemas
# --------------------------
class OptionPayload(CamelModel):
    title: Optional[str] = None
    model: Optional[str] = None
    states: Optional[List[str]] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None


class OptionOut(CamelModel):
    id: int
    title: str
    model: str
    states: Optional[List[str]] = None
    description: Optional[str] = None
    is_active: bool = True

    @field_validator("states", mode="before")
    @classmethod
    def parse_stored_states(cls, value):
        # stored as JSON text in the options table
        if isinstance(value, str):
            return json.loads(value) if value else None
        return value


# --------------------------
# Product Schemas
# --------------------------
class ProductOptionIn(CamelModel):
    option_id: int
    max_no: Optional[int] = None


class ProductPayload(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    product_options: Optional[List[ProductOptionIn]] = None


class ProductOptionOut(CamelModel):
    id: int
    option_id: int
    max_no: Optional[int] = None
    option: Optional[OptionOut] = None


class ProductOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    product_options: List[ProductOptionOut] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
