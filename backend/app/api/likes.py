"""
API endpoints for likes.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import get_current_user
from app.crud import like as like_crud
from app.crud import post as post_crud
from app.crud import user as user_crud
from app.db.base import MAX_ID
from app.db.session import get_db
from app.schemas.like import LikeCount, LikeRead, LikeRequest

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["likes"],
    dependencies=[Depends(get_current_user)],
)


@router.post("/likes", response_model=LikeRead, summary="Like a post")
async def give_like(like_in: LikeRequest, db: AsyncSession = Depends(get_db)):
    """
    Record a like from ``user_id`` on ``post_id``.

    Raises:
        HTTPException 404: If the post or the user does not exist
    """
    logger.info(f"Giving like to post {like_in.post_id}")
    post = await post_crud.get_post(db, like_in.post_id)
    if post is None:
        logger.warning(f"Post {like_in.post_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    user = await user_crud.get_user(db, like_in.user_id)
    if user is None:
        logger.warning(f"User {like_in.user_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    db_like = await like_crud.create_like(db, post_id=post.id, user_id=user.id)
    logger.info(f"Like {db_like.id} registered")
    return db_like


@router.delete("/likes", response_model=LikeRead, summary="Remove a like")
async def remove_like(like_in: LikeRequest, db: AsyncSession = Depends(get_db)):
    logger.info(f"Removing like of user {like_in.user_id} from post {like_in.post_id}")
    db_like = await like_crud.get_like(db, like_in.post_id, like_in.user_id)
    if db_like is None:
        logger.warning(f"No like from user {like_in.user_id} on post {like_in.post_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Like not found")
    db_like = await like_crud.delete_like(db, db_like)
    logger.info("Like removed")
    return db_like


@router.get("/posts/{post_id}/likes", response_model=LikeCount, summary="Count the likes of a post")
async def count_likes(post_id: int = Path(..., ge=1, le=MAX_ID), db: AsyncSession = Depends(get_db)):
    logger.info(f"Counting likes of post {post_id}")
    likes = await like_crud.count_likes(db, post_id)
    return LikeCount(post_id=post_id, likes=likes)
