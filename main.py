# main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, load_settings
from app.core.db import build_engine, build_session_factory, init_models
from app.core.errors import register_exception_handlers
from app.routers import api_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        await init_models(engine)
        logger.info("Database ready (%s)", settings.db_type)
        yield
        await engine.dispose()

    app = FastAPI(
        title="Order Desk API",
        description="FastAPI backend for customers, catalog and order tracking",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS setup
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/", tags=["Health"])
    async def health_check():
        return {"status": "ok", "message": "Backend is running"}

    # Register routers
    app.include_router(api_router)
    return app


app = create_app()
