from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from marketplace.platform.config.core_setting import settings
from marketplace.platform.logging.loguru_io import Logger


def _engine_options(db_url: str) -> dict[str, Any]:
    # Pool sizing only applies to server databases
    if db_url.startswith('sqlite'):
        return {}
    return {
        'pool_size': 20,
        'max_overflow': 20,
        'pool_timeout': 30,
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }


engine = create_async_engine(
    settings.DATABASE_URL_ASYNC,
    echo=False,
    **_engine_options(settings.DATABASE_URL_ASYNC),
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


async def create_db_and_tables() -> None:
    """Create database tables if they don't exist"""
    # Register every model on Base.metadata before create_all
    from marketplace.account.infra import account_model  # noqa: F401
    from marketplace.order.infra import order_model  # noqa: F401
    from marketplace.product.infra import product_model  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    Logger.base.info('Database tables ensured')


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        yield session
