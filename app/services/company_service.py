# app/services/company_service.py
import logging
from typing import List

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.core.errors import persistence_error
from app.models.customer_models import Company
from app.schemas.customer_schemas import CompanyCreate, CompanyUpdate, CompanyWithCustomers

logger = logging.getLogger(__name__)


async def _load_company(db: AsyncSession, company_id: int) -> Company:
    result = await db.execute(
        select(Company)
        .where(Company.id == company_id)
        .options(selectinload(Company.customers))
        .execution_options(populate_existing=True)
    )
    company = result.scalars().first()
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    return company


# --------------------------
# LIST / GET
# --------------------------
async def list_companies(db: AsyncSession) -> List[CompanyWithCustomers]:
    result = await db.execute(select(Company).options(selectinload(Company.customers)).order_by(Company.id))
    return [CompanyWithCustomers.model_validate(c) for c in result.scalars().all()]


async def get_company(db: AsyncSession, company_id: int) -> CompanyWithCustomers:
    return CompanyWithCustomers.model_validate(await _load_company(db, company_id))


# --------------------------
# CREATE
# --------------------------
async def create_company(db: AsyncSession, data: CompanyCreate) -> CompanyWithCustomers:
    if not data.name or not data.name.strip():
        raise HTTPException(status_code=400, detail="Company name is required")
    try:
        company = Company(**data.model_dump())
        db.add(company)
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to create company", e))
    return await get_company(db, company.id)


# --------------------------
# UPDATE
# --------------------------
async def update_company(db: AsyncSession, company_id: int, data: CompanyUpdate) -> CompanyWithCustomers:
    company = await _load_company(db, company_id)
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(company, key, value)
    try:
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to update company", e))
    return await get_company(db, company_id)


# --------------------------
# DELETE
# --------------------------
async def delete_company(db: AsyncSession, company_id: int) -> dict:
    company = await db.get(Company, company_id)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    try:
        await db.delete(company)
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to delete company", e))
    logger.info("Company %s deleted", company_id)
    return {"message": "Company deleted successfully"}
