"""
Schema reset script.

Drops the vendor_applications table and recreates it empty. Run from the
backend directory: ``python reset_db.py`` (add ``--yes`` to skip the prompt).
"""

import asyncio
import sys
sys.path.append('src')

from infrastructure.config import get_settings, get_logger, setup_logger
from infrastructure.database.session import engine, Base
from infrastructure.database import models  # noqa: F401

logger = get_logger(__name__)


async def reset_database() -> None:
    """Drop every mapped table and create the schema again."""
    tables = ", ".join(sorted(Base.metadata.tables))
    try:
        logger.info(f"🔥 Dropping tables: {tables}")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        logger.info("🏗️ Creating fresh tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ Vendor application schema ready")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    settings = get_settings()
    setup_logger(level=settings.log_level, log_format="text")

    if "--yes" not in sys.argv:
        print(f"\n⚠️  This will DELETE ALL vendor applications in {settings.database_url.rsplit('/', 1)[-1]}\n")
        if input("Type 'yes' to continue: ").strip().lower() != "yes":
            print("\n❌ Cancelled.\n")
            sys.exit(1)

    asyncio.run(reset_database())
