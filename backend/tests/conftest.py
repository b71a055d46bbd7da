"""Shared test fixtures for all test modules."""

import contextlib

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from discount.core import database as db_module
from discount.core.database import Base
from discount.core.dependencies import get_mediator
from discount.repositories.discount_repository import DiscountRepository

# Create an in-memory SQLite engine with StaticPool so all connections
# share the same database state and there are no file-locking issues.
_test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and clear all data after.

    Patches the module-level engine so application code and the cached
    mediator use the in-memory test database.
    """
    original_engine = db_module.engine
    db_module.engine = _test_engine
    get_mediator.cache_clear()

    db_module.init_db()

    yield

    with _test_engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            with contextlib.suppress(OperationalError):
                conn.execute(table.delete())

    db_module.engine = original_engine
    get_mediator.cache_clear()


@pytest.fixture
def engine():
    return _test_engine


@pytest.fixture
def repository(engine):
    return DiscountRepository(engine)
