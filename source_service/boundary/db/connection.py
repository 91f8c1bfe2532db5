"""
Database connection management.

Provides the SQLAlchemy engine and session factory used by the worker.

Dependencies: sqlalchemy, source_service.configs
System role: Database connection lifecycle management
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

from source_service.configs.database import DatabaseSettings


def get_engine(db_config: DatabaseSettings) -> Engine:
    """
    Create SQLAlchemy engine with connection pooling and health checks.

    pool_pre_ping=True verifies connections before use so a worker that sat
    idle on the queue does not fail its next job on a stale connection.

    Args:
        db_config: Database settings

    Returns:
        Engine: Configured SQLAlchemy engine

    Raises:
        ValueError: DATABASE_URL not set
    """
    if not db_config.url:
        raise ValueError("DATABASE_URL environment variable not set")

    return create_engine(
        db_config.sqlalchemy_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_pre_ping=True,
    )


def get_session_factory(engine: Engine) -> sessionmaker:
    """
    Create session factory bound to an engine.

    Args:
        engine: SQLAlchemy engine

    Returns:
        sessionmaker: Session factory configured for manual transaction control
    """
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
