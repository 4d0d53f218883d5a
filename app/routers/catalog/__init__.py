from fastapi import APIRouter
from .options_router import router as options_router
from .products_router import router as products_router

router = APIRouter(prefix="/api")

router.include_router(options_router)
router.include_router(products_router)
