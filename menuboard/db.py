from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlalchemy.future import select
import logging

from menuboard.core.config import settings
from menuboard.core.constants import DEFAULT_SECTIONS
from menuboard.models.base import Base

log = logging.getLogger(__name__)

DATABASE_URL = settings.async_database_url
if not DATABASE_URL:
    raise ValueError("❌ DATABASE_URL is not set!")

# SQLite (file based) gets a fresh connection per session; Postgres keeps a pool
if settings.is_sqlite:
    engine = create_async_engine(DATABASE_URL, echo=settings.sql_echo, poolclass=NullPool)
else:
    engine = create_async_engine(DATABASE_URL, echo=settings.sql_echo, pool_pre_ping=True)

# Async session maker
async_session = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


# Dependency
async def get_db():
    async with async_session() as session:
        yield session


async def create_db_and_tables():
    import menuboard.models  # registers all models on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db_and_tables():
    import menuboard.models

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def seed_default_sections():
    """Insert the starter sections when the sections table is empty."""
    from menuboard.models.menu.section import Section

    async with async_session() as db:
        result = await db.execute(select(Section.id).limit(1))
        if result.first() is not None:
            return False

        for index, name in enumerate(DEFAULT_SECTIONS):
            db.add(Section(name=name, display_order=index))
        await db.commit()
        log.info("Seeded %d default sections", len(DEFAULT_SECTIONS))
        return True


# Reusable engine getter
def get_async_engine():
    return engine
