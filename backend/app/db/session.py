"""
Database session management module.
"""
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker

from app.core.config import settings

engine_options = {"pool_pre_ping": True}
if not settings.DB_URI.startswith("sqlite"):
    engine_options.update(
        pool_size=10,
        max_overflow=20,
        pool_timeout=30,
        pool_recycle=1800,
    )

# Create SQLAlchemy engine
engine = create_async_engine(settings.DB_URI, **engine_options)

# Create session factory
SessionLocal = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session.
    Handles commit on success and rollback on failure.

    Yields:
        AsyncSession: Database session
    """
    async with SessionLocal() as session:
        try:
            yield session
            # If the request handler completed successfully, commit the transaction
            await session.commit()
        except Exception:
            # If any exception occurred during the request handling, rollback
            await session.rollback()
            raise  # Re-raise the exception so FastAPI can handle it
