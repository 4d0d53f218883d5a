from fastapi import APIRouter
from .companies_router import router as companies_router
from .customers_router import router as customers_router
from .calls_router import router as calls_router

router = APIRouter(prefix="/api")

router.include_router(companies_router)
router.include_router(customers_router)
router.include_router(calls_router)
