# app/services/customer_service.py
import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.core.errors import persistence_error
from app.models.customer_models import Company, Contact, Customer
from app.models.order_models import Order
from app.schemas.customer_schemas import (
    COMPANY,
    INDIVIDUAL,
    CompanySummary,
    ContactIn,
    ContactOut,
    CustomerOut,
    CustomerPayload,
)

logger = logging.getLogger(__name__)


# --------------------------
# Helpers
# --------------------------
def company_as_customer(company: Company) -> CustomerOut:
    return CustomerOut(
        id=company.id,
        name=company.name,
        type=COMPANY,
        serial=company.serial,
        tax_code=company.tax_code,
        phone=company.phone,
        address=company.address,
        description=company.description,
        created_at=company.created_at,
        updated_at=company.updated_at,
    )


def individual_as_customer(customer: Customer) -> CustomerOut:
    return CustomerOut(
        id=customer.id,
        name=customer.name,
        type=INDIVIDUAL,
        mobile=customer.mobile,
        position=customer.position,
        phone=customer.mobile,
        address=None,
        description=customer.description,
        company_id=customer.company_id,
        company=CompanySummary.model_validate(customer.company) if customer.company else None,
        contacts=[ContactOut.model_validate(c) for c in customer.contacts],
        created_at=customer.created_at,
        updated_at=customer.updated_at,
    )


def _build_contacts(contacts: List[ContactIn]) -> List[Contact]:
    return [
        Contact(
            title=c.title,
            content=c.content,
            type=c.type,
            is_new=c.is_new if c.is_new is not None else True,
        )
        for c in contacts
    ]


async def _load_customer(db: AsyncSession, customer_id: int) -> Optional[Customer]:
    result = await db.execute(
        select(Customer)
        .where(Customer.id == customer_id)
        .options(selectinload(Customer.company), selectinload(Customer.contacts))
        .execution_options(populate_existing=True)
    )
    return result.scalars().first()


async def _check_company(db: AsyncSession, company_id: Optional[int]) -> None:
    if company_id is not None and await db.get(Company, company_id) is None:
        raise HTTPException(status_code=404, detail=f"Company {company_id} not found")


# --------------------------
# LIST (companies first, then individuals)
# --------------------------
async def list_customers(db: AsyncSession) -> List[CustomerOut]:
    companies = (await db.execute(select(Company).order_by(Company.id))).scalars().all()
    individuals = (
        await db.execute(
            select(Customer)
            .options(selectinload(Customer.company), selectinload(Customer.contacts))
            .order_by(Customer.id)
        )
    ).scalars().all()
    return [company_as_customer(c) for c in companies] + [individual_as_customer(c) for c in individuals]


# --------------------------
# GET SINGLE
# --------------------------
async def get_customer(db: AsyncSession, customer_id: int, customer_type: str = INDIVIDUAL) -> CustomerOut:
    if customer_type == COMPANY:
        company = await db.get(Company, customer_id)
        if not company:
            raise HTTPException(status_code=404, detail="Company not found")
        return company_as_customer(company)

    customer = await _load_customer(db, customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return individual_as_customer(customer)


# --------------------------
# CREATE
# --------------------------
async def create_customer(db: AsyncSession, data: CustomerPayload) -> CustomerOut:
    if not data.name or not data.name.strip():
        raise HTTPException(status_code=400, detail="Name is required")

    if data.type == COMPANY:
        company = Company(
            name=data.name,
            serial=data.serial or None,
            tax_code=data.tax_code or None,
            phone=data.phone or None,
            address=data.address or None,
            description=data.description or None,
        )
        try:
            db.add(company)
            await db.commit()
            await db.refresh(company)
        except Exception as e:
            await db.rollback()
            raise HTTPException(status_code=500, detail=persistence_error("Failed to create customer", e))
        return company_as_customer(company)

    await _check_company(db, data.company_id)
    try:
        customer = Customer(
            name=data.name,
            mobile=data.mobile or data.phone or None,
            position=data.position or None,
            description=data.description or None,
            company_id=data.company_id,
            contacts=_build_contacts(data.contacts or []),
        )
        db.add(customer)
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to create customer", e))

    logger.info("Customer %s created", customer.id)
    return individual_as_customer(await _load_customer(db, customer.id))


# --------------------------
# UPDATE
# --------------------------
async def update_customer(db: AsyncSession, customer_id: int, data: CustomerPayload) -> CustomerOut:
    if not data.name or not data.name.strip():
        raise HTTPException(status_code=400, detail="Name is required")

    if data.type == COMPANY:
        company = await db.get(Company, customer_id)
        if not company:
            raise HTTPException(status_code=404, detail="Company not found")
        company.name = data.name
        company.serial = data.serial or None
        company.tax_code = data.tax_code or None
        company.phone = data.phone or None
        company.address = data.address or None
        company.description = data.description or None
        try:
            await db.commit()
            await db.refresh(company)
        except Exception as e:
            await db.rollback()
            raise HTTPException(status_code=500, detail=persistence_error("Failed to update customer", e))
        return company_as_customer(company)

    customer = await _load_customer(db, customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    await _check_company(db, data.company_id)

    try:
        customer.name = data.name
        customer.mobile = data.mobile or data.phone or None
        customer.position = data.position or None
        customer.description = data.description or None
        customer.company_id = data.company_id
        # a supplied contact list replaces the stored one
        if data.contacts is not None:
            customer.contacts = _build_contacts(data.contacts)
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to update customer", e))

    return individual_as_customer(await _load_customer(db, customer_id))


# --------------------------
# DELETE
# --------------------------
async def delete_customer(db: AsyncSession, customer_id: int, customer_type: str = INDIVIDUAL) -> dict:
    model = Company if customer_type == COMPANY else Customer
    target = await db.get(model, customer_id)
    if not target:
        raise HTTPException(status_code=404, detail="Customer not found")

    if model is Customer:
        has_orders = await db.execute(select(Order.id).where(Order.customer_id == customer_id).limit(1))
        if has_orders.first() is not None:
            raise HTTPException(status_code=409, detail="Customer has orders and cannot be deleted")

    try:
        await db.delete(target)
        await db.commit()
    except Exception as e:
        await db.rollback()
        raise HTTPException(status_code=500, detail=persistence_error("Failed to delete customer", e))

    logger.info("%s %s deleted", customer_type, customer_id)
    return {"message": "Customer deleted successfully"}
