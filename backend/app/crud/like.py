"""
CRUD operations for likes.
"""
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, select
from app.db.models.like import Like


async def create_like(db: AsyncSession, post_id: int, user_id: int) -> Like:
    """
    Record a like. Existing likes for the same pair are not checked.
    """
    db_like = Like(post_id=post_id, user_id=user_id)
    db.add(db_like)
    await db.flush()
    await db.refresh(db_like)
    return db_like


async def get_like(db: AsyncSession, post_id: int, user_id: int) -> Optional[Like]:
    """
    Get the first like matching the post/user pair.

    Args:
        db: Database session
        post_id: Post ID
        user_id: User ID

    Returns:
        Optional[Like]: The oldest matching like, or None
    """
    result = await db.execute(
        select(Like)
        .where(Like.post_id == post_id, Like.user_id == user_id)
        .order_by(Like.id)
        .limit(1)
    )
    return result.scalar_one_or_none()


async def delete_like(db: AsyncSession, db_like: Like) -> Like:
    await db.delete(db_like)
    await db.flush()
    return db_like


async def count_likes(db: AsyncSession, post_id: int) -> int:
    result = await db.execute(select(func.count(Like.id)).where(Like.post_id == post_id))
    return result.scalar_one()
