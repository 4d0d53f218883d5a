from fastapi import APIRouter
from .auth import router as auth_router
from .crm import router as crm_router
from .catalog import router as catalog_router
from .orders_router import router as orders_router

api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(crm_router)
api_router.include_router(catalog_router)
api_router.include_router(orders_router)
