# scripts/init_db.py
import asyncio

from menuboard.core.config import settings
from menuboard.db import create_db_and_tables, seed_default_sections


async def create_tables():
    await create_db_and_tables()
    print("✅ All missing tables created.")
    if settings.seed_default_sections and await seed_default_sections():
        print("🍽️  Default sections seeded.")


if __name__ == "__main__":
    asyncio.run(create_tables())
