"""
Production FastAPI Application

Creates the schema and seeds the default admin on startup.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from marketplace.account.infra.bcrypt_password_hasher import BcryptPasswordHasher
from marketplace.account.use_case.auth_use_case import seed_default_admin
from marketplace.platform.app_factory import create_app
from marketplace.platform.database.db_setting import (
    async_session_maker,
    create_db_and_tables,
    engine,
)
from marketplace.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from marketplace.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Marketplace] Starting up...')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Marketplace] Database tables ready')

    async with async_session_maker() as session:
        await seed_default_admin(SqlAlchemyUnitOfWork(session), BcryptPasswordHasher())

    Logger.base.info('✅ [Marketplace] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Marketplace] Shutting down...')
    await engine.dispose()
    Logger.base.info('👋 [Marketplace] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
