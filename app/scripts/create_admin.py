# app/scripts/create_admin.py
import asyncio
import logging
import os

from sqlalchemy.future import select

from app.core.config import load_settings
from app.core.db import build_engine, build_session_factory, init_models
from app.core.security import hash_password
from app.models.user_models import User

logger = logging.getLogger(__name__)


async def create_admin(session_factory, username: str, password: str) -> User:
    """
    Ensure an enabled admin account exists. An existing user with the same
    username is promoted and gets the given password.
    """
    async with session_factory() as session:
        result = await session.execute(select(User).where(User.username == username))
        admin = result.scalars().first()
        if admin:
            admin.role = "admin"
            admin.enabled = True
            admin.password_hash = hash_password(password)
            logger.info("Admin user %s updated", username)
        else:
            admin = User(
                username=username,
                password_hash=hash_password(password),
                name=username,
                role="admin",
                enabled=True,
            )
            session.add(admin)
            logger.info("Admin user %s created", username)
        await session.commit()
        await session.refresh(admin)
        return admin


async def _run() -> None:
    settings = load_settings()
    engine = build_engine(settings)
    try:
        await init_models(engine)
        await create_admin(
            build_session_factory(engine),
            os.getenv("ADMIN_USERNAME", "admin"),
            os.getenv("ADMIN_PASSWORD", "admin123"),
        )
    finally:
        await engine.dispose()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_run())


if __name__ == "__main__":
    main()
