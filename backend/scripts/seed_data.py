"""
Seed roles, starter users, walk difficulties and regions.
Safe to run repeatedly; only missing rows are inserted.
"""
import os
import asyncio
import argparse
import sys

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

# Add parent directory to path to import walks_api modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from walks_api.config import get_settings
from walks_api.database import Base
from walks_api.seed import seed_database
import walks_api.models  # noqa

settings = get_settings()


async def main(database_url: str, create_tables: bool = False):
    engine = create_async_engine(database_url)
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    if create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        print("Ensured all tables exist.")

    async with async_session() as session:
        added = await seed_database(session)

    await engine.dispose()

    for kind, count in added.items():
        print(f"  {kind}: {count} added")
    print("Seeding complete.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed NZ Walks reference data")
    parser.add_argument(
        "--database-url",
        default=settings.DATABASE_URL,
        help="Database URL (defaults to DATABASE_URL from settings)",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create tables from the models before seeding (skip when using Alembic)",
    )
    args = parser.parse_args()

    asyncio.run(main(args.database_url, create_tables=args.create_tables))
