"""
CRUD operations for comments.
"""
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.db.models.comment import Comment
from app.schemas.comment import CommentCreate, CommentUpdate


async def create_comment(db: AsyncSession, comment_in: CommentCreate) -> Comment:
    """
    Create a new comment.

    Args:
        db: Database session
        comment_in: Comment data, including post and author ids

    Returns:
        Comment: Created comment
    """
    db_comment = Comment(**comment_in.model_dump())
    db.add(db_comment)
    await db.flush()
    await db.refresh(db_comment)
    return db_comment


async def get_comment(db: AsyncSession, comment_id: int) -> Optional[Comment]:
    result = await db.execute(select(Comment).where(Comment.id == comment_id))
    return result.scalar_one_or_none()


async def get_comments_for_post(db: AsyncSession, post_id: int) -> List[Comment]:
    """
    Get every comment on a post, oldest first.
    """
    result = await db.execute(
        select(Comment).where(Comment.post_id == post_id).order_by(Comment.id)
    )
    return list(result.scalars().all())


async def update_comment(db: AsyncSession, db_comment: Comment, comment_in: CommentUpdate) -> Comment:
    db_comment.content = comment_in.content
    await db.flush()
    await db.refresh(db_comment)
    return db_comment


async def delete_comment(db: AsyncSession, db_comment: Comment) -> Comment:
    await db.delete(db_comment)
    await db.flush()
    return db_comment
