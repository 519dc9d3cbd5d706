import asyncio
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi.testclient import TestClient
import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine


# Dedicated SQLite database for the test session
TEST_DB_PATH = Path(__file__).parent / 'test_marketplace.db'
TEST_DATABASE_URL = f'sqlite+aiosqlite:///{TEST_DB_PATH}'
os.environ['DATABASE_URL'] = TEST_DATABASE_URL
os.environ.setdefault('SECRET_KEY', 'test-secret-key-for-marketplace-0123456789')
os.environ['DEBUG'] = 'false'

# Override LOG_DIR to use test log directory
test_log_dir = Path(__file__).parent / 'test_log'
test_log_dir.mkdir(exist_ok=True)
os.environ['TEST_LOG_DIR'] = str(test_log_dir)

# Load remaining settings from .env or .env.example
env_file = '.env' if Path('.env').exists() else '.env.example'
load_dotenv(env_file)

from marketplace.main import app  # noqa: E402
from marketplace.platform.config.core_setting import settings  # noqa: E402
from marketplace.platform.database.db_setting import Base  # noqa: E402


async def execute_sql(url: str, statements: list, params: dict | None = None):
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        for stmt in statements:
            await conn.execute(text(stmt), params or {})
    await engine.dispose()


async def setup_test_database():
    from marketplace.account.infra import account_model  # noqa: F401
    from marketplace.order.infra import order_model  # noqa: F401
    from marketplace.product.infra import product_model  # noqa: F401

    TEST_DB_PATH.unlink(missing_ok=True)
    engine = create_async_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


async def clean_all_tables():
    # The seeded default admin survives between tests
    statements = []
    for table in reversed(Base.metadata.sorted_tables):
        if table.name == 'admins':
            statements.append('DELETE FROM admins WHERE email != :admin_email')
        else:
            statements.append(f'DELETE FROM {table.name}')
    await execute_sql(
        TEST_DATABASE_URL, statements, params={'admin_email': settings.DEFAULT_ADMIN_EMAIL}
    )


def pytest_sessionstart(session):
    asyncio.run(setup_test_database())


@pytest.fixture(scope='session')
def app_client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def client(app_client):
    asyncio.run(clean_all_tables())
    app_client.headers.pop('Authorization', None)
    yield app_client
    app_client.headers.pop('Authorization', None)


@pytest.fixture
def execute_sql_statement():
    def _execute(statement: str, params: dict | None = None, fetch: bool = False):
        async def _run():
            engine = create_async_engine(TEST_DATABASE_URL)
            async with engine.begin() as conn:
                result = await conn.execute(text(statement), params or {})
                rows = [dict(row._mapping) for row in result] if fetch else None
            await engine.dispose()
            return rows

        return asyncio.run(_run())

    return _execute


# Common test fixtures for unit tests
@pytest.fixture
def mock_uow():
    """Mock unit of work for testing."""
    from unittest.mock import AsyncMock, Mock

    uow = Mock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    for repo_name in ('admins', 'sellers', 'customers', 'products', 'carts', 'orders'):
        setattr(uow, repo_name, AsyncMock())
    return uow
