from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import declarative_base

from discount.core.config import settings


def build_engine(dsn: str, echo: bool = False) -> Engine:
    """Create an engine for the given DSN.

    SQLite needs ``check_same_thread`` disabled because requests are served
    from worker threads of the REST and RPC servers.
    """
    return create_engine(
        dsn,
        echo=echo,
        connect_args=({"check_same_thread": False} if dsn.startswith("sqlite") else {}),
    )


engine = build_engine(settings.DISCOUNT_DATABASE_DSN, echo=settings.DEBUG)

Base: Any = declarative_base()


def get_engine() -> Engine:
    return engine


def init_db() -> None:
    """Initialize database tables."""
    # Registers the coupon table on Base.metadata
    import discount.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
