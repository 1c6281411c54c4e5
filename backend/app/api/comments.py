"""
API endpoints for comments.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import get_current_user
from app.crud import comment as comment_crud
from app.crud import post as post_crud
from app.crud import user as user_crud
from app.db.base import MAX_ID
from app.db.session import get_db
from app.schemas.comment import CommentCreate, CommentRead, CommentUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/comments",
    tags=["comments"],
    dependencies=[Depends(get_current_user)],
)


async def _get_comment_or_404(db: AsyncSession, comment_id: int):
    db_comment = await comment_crud.get_comment(db, comment_id)
    if db_comment is None:
        logger.warning(f"Comment {comment_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")
    return db_comment


@router.get("", response_model=List[CommentRead], summary="List the comments of a post")
async def list_comments(
    post_id: int = Query(..., ge=1, le=MAX_ID, description="ID of the post whose comments are listed"),
    db: AsyncSession = Depends(get_db),
):
    logger.info(f"Listing comments of post {post_id}")
    comments = await comment_crud.get_comments_for_post(db, post_id)
    logger.info(f"Listed {len(comments)} comments")
    return comments


@router.post("", response_model=CommentRead, status_code=status.HTTP_201_CREATED, summary="Create a comment")
async def create_comment(comment_in: CommentCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a comment on a post.

    The author is the ``user_id`` sent in the body, not the token holder.

    Raises:
        HTTPException 404: If the post or the user does not exist
    """
    if await post_crud.get_post(db, comment_in.post_id) is None:
        logger.warning(f"Post {comment_in.post_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    if await user_crud.get_user(db, comment_in.user_id) is None:
        logger.warning(f"User {comment_in.user_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    logger.info(f"Creating comment on post {comment_in.post_id}")
    db_comment = await comment_crud.create_comment(db, comment_in)
    logger.info(f"Comment {db_comment.id} created")
    return db_comment


@router.put("/{comment_id}", response_model=CommentRead, summary="Update a comment")
async def update_comment(
    comment_in: CommentUpdate,
    comment_id: int = Path(..., ge=1, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
):
    logger.info(f"Updating comment {comment_id}")
    db_comment = await _get_comment_or_404(db, comment_id)
    db_comment = await comment_crud.update_comment(db, db_comment, comment_in)
    logger.info(f"Comment {comment_id} updated")
    return db_comment


@router.delete("/{comment_id}", response_model=CommentRead, summary="Delete a comment")
async def delete_comment(comment_id: int = Path(..., ge=1, le=MAX_ID), db: AsyncSession = Depends(get_db)):
    logger.info(f"Deleting comment {comment_id}")
    db_comment = await _get_comment_or_404(db, comment_id)
    db_comment = await comment_crud.delete_comment(db, db_comment)
    logger.info(f"Comment {comment_id} deleted")
    return db_comment
