"""
CRUD operations for users.
"""
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.db.models.user import User


async def create_user(db: AsyncSession, name: str, email: str, password_hash: str) -> User:
    """
    Create a new user with an already hashed password.
    """
    db_user = User(name=name, email=email, password_hash=password_hash)
    db.add(db_user)
    await db.flush()
    await db.refresh(db_user)
    return db_user


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()
