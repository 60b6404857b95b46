from sqlalchemy import Table
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from papaya.core.config import settings

engine = create_async_engine(settings.DATABASE_URL, pool_pre_ping=True)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def get_session():
    async with SessionLocal() as session:
        yield session


def insert_ignore(session: AsyncSession, table: Table, rows: list[dict]):
    """INSERT that skips rows already present, so concurrent writers of the
    same association row do not trip the primary key."""
    insert_ = pg_insert if session.get_bind().dialect.name == "postgresql" else sqlite_insert
    return insert_(table).values(rows).on_conflict_do_nothing()
