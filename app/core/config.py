# app/core/config.py
import logging
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEV_JWT_SECRET = "dev-only-secret-change-me"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    app_env: str = "production"
    db_type: str = "sqlite"
    database_url: str = "sqlite+aiosqlite:///./orders.db"
    sql_echo: bool = False

    jwt_secret: str = DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def is_sqlite(self) -> bool:
        return self.db_type == "sqlite"


def load_settings() -> Settings:
    """
    Build Settings from the environment (.env is loaded on import).
    """
    app_env = os.getenv("APP_ENV", "production").lower()

    # -----------------------
    # Database Config
    # -----------------------
    db_type = os.getenv("DB_TYPE", "sqlite").lower()
    if db_type == "postgres":
        database_url = os.getenv("DATABASE_URL")
        if not database_url:
            raise ValueError("DATABASE_URL is required for Postgres setup")
    elif db_type == "sqlite":
        database_url = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./orders.db")
    else:
        raise ValueError(f"Unsupported DB_TYPE: {db_type}")

    # -----------------------
    # JWT Config
    # -----------------------
    jwt_secret = os.getenv("JWT_SECRET")
    if not jwt_secret:
        if app_env not in {"development", "test"}:
            raise ValueError("JWT_SECRET environment variable must be set")
        logger.warning("JWT_SECRET not set, using the development secret")
        jwt_secret = DEV_JWT_SECRET

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    return Settings(
        app_env=app_env,
        db_type=db_type,
        database_url=database_url,
        sql_echo=_as_bool(os.getenv("SQL_ECHO", "false")),
        jwt_secret=jwt_secret,
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        access_token_expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24))),
        cors_origins=origins or ["*"],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
