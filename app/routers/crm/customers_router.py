from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.customer_schemas import COMPANY, INDIVIDUAL, CustomerOut, CustomerPayload
from app.schemas.response_schemas import MessageResponse
from app.services import customer_service
from app.utils.check_roles import ALL_ROLES, STAFF_ROLES, require_role
from app.utils.get_user import get_current_user

router = APIRouter(prefix="/customers", tags=["Customers"])

CUSTOMER_TYPE = f"^({COMPANY}|{INDIVIDUAL})$"


# GET ALL (companies and individuals together)
@router.get("", response_model=List[CustomerOut])
@require_role(ALL_ROLES)
async def list_customers_route(db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await customer_service.list_customers(db)


# GET SINGLE
@router.get("/{customer_id}", response_model=CustomerOut)
@require_role(ALL_ROLES)
async def get_customer_route(
    customer_id: int,
    type: str = Query(INDIVIDUAL, pattern=CUSTOMER_TYPE, description="company or individual"),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await customer_service.get_customer(db, customer_id, type)


# CREATE
@router.post("", response_model=CustomerOut)
@require_role(ALL_ROLES)
async def create_customer_route(
    customer: CustomerPayload,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await customer_service.create_customer(db, customer)


# UPDATE
@router.put("/{customer_id}", response_model=CustomerOut)
@require_role(ALL_ROLES)
async def update_customer_route(
    customer_id: int,
    customer: CustomerPayload,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await customer_service.update_customer(db, customer_id, customer)


# DELETE
@router.delete("/{customer_id}", response_model=MessageResponse)
@require_role(STAFF_ROLES)
async def delete_customer_route(
    customer_id: int,
    type: str = Query(INDIVIDUAL, pattern=CUSTOMER_TYPE, description="company or individual"),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await customer_service.delete_customer(db, customer_id, type)
