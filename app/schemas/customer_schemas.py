# app/schemas/customer_schemas.py
from typing import List, Optional
from datetime import datetime

from app.schemas.response_schemas import CamelModel

COMPANY = "company"
INDIVIDUAL = "individual"


# --------------------------
# Contact Schemas
# --------------------------
class ContactIn(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None
    type: Optional[str] = None
    is_new: Optional[bool] = None


class ContactOut(CamelModel):
    id: int
    title: Optional[str] = None
    content: Optional[str] = None
    type: Optional[str] = None
    is_new: bool


# --------------------------
# Company Schemas
# --------------------------
class CompanyBase(CamelModel):
    serial: Optional[str] = None
    tax_code: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None


class CompanyCreate(CompanyBase):
    name: str


class CompanyUpdate(CompanyBase):
    name: Optional[str] = None


class CompanySummary(CamelModel):
    id: int
    name: str


class CustomerSummary(CamelModel):
    id: int
    name: str
    mobile: Optional[str] = None
    position: Optional[str] = None


class CompanyOut(CompanyBase):
    id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CompanyWithCustomers(CompanyOut):
    customers: List[CustomerSummary] = []


# --------------------------
# Customer Schemas
# --------------------------
class CustomerPayload(CamelModel):
    """
    Body of POST/PUT /api/customers. `type` selects company vs individual.
    """
    name: str
    type: Optional[str] = INDIVIDUAL
    phone: Optional[str] = None
    mobile: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None
    serial: Optional[str] = None
    tax_code: Optional[str] = None
    company_id: Optional[int] = None
    position: Optional[str] = None
    contacts: Optional[List[ContactIn]] = None


class CustomerOut(CamelModel):
    """Shared shape for companies and individuals in the customers listing."""
    id: int
    name: str
    type: str
    mobile: Optional[str] = None
    position: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None
    serial: Optional[str] = None
    tax_code: Optional[str] = None
    company_id: Optional[int] = None
    company: Optional[CompanySummary] = None
    contacts: List[ContactOut] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# --------------------------
# Call Schemas
# --------------------------
class CallCreate(CamelModel):
    customer_id: int
    subject: str
    description: Optional[str] = None
    call_time: Optional[int] = None


class CallOut(CamelModel):
    id: int
    customer_id: int
    subject: str
    description: Optional[str] = None
    call_time: int
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
