from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.customer_schemas import CompanyCreate, CompanyUpdate, CompanyWithCustomers
from app.schemas.response_schemas import MessageResponse
from app.services import company_service
from app.utils.check_roles import ALL_ROLES, STAFF_ROLES, require_role
from app.utils.get_user import get_current_user

router = APIRouter(prefix="/companies", tags=["Companies"])


# GET ALL
@router.get("", response_model=List[CompanyWithCustomers])
@require_role(ALL_ROLES)
async def list_companies_route(db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await company_service.list_companies(db)


# GET SINGLE
@router.get("/{company_id}", response_model=CompanyWithCustomers)
@require_role(ALL_ROLES)
async def get_company_route(company_id: int, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await company_service.get_company(db, company_id)


# CREATE
@router.post("", response_model=CompanyWithCustomers)
@require_role(STAFF_ROLES)
async def create_company_route(
    company: CompanyCreate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await company_service.create_company(db, company)


# UPDATE
@router.put("/{company_id}", response_model=CompanyWithCustomers)
@require_role(STAFF_ROLES)
async def update_company_route(
    company_id: int,
    company: CompanyUpdate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await company_service.update_company(db, company_id, company)


# DELETE
@router.delete("/{company_id}", response_model=MessageResponse)
@require_role(STAFF_ROLES)
async def delete_company_route(company_id: int, db: AsyncSession = Depends(get_db), _user=Depends(get_current_user)):
    return await company_service.delete_company(db, company_id)
