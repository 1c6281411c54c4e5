"""
API endpoints for post-related operations.
"""
import logging
import math
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import get_current_user
from app.core.config import settings
from app.crud import post as post_crud
from app.crud import user as user_crud
from app.db.base import MAX_ID
from app.db.models.user import User
from app.db.session import get_db
from app.schemas.post import (
    PostCreate,
    PostDetail,
    PostPage,
    PostRead,
    PostUpdate,
    PostWithCounts,
    PostWithUser,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/posts",
    tags=["posts"],
    dependencies=[Depends(get_current_user)],
)


async def _get_post_or_404(db: AsyncSession, post_id: int):
    db_post = await post_crud.get_post(db, post_id)
    if db_post is None:
        logger.warning(f"Post {post_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return db_post


async def _ensure_user_exists(db: AsyncSession, user_id: int) -> None:
    if await user_crud.get_user(db, user_id) is None:
        logger.warning(f"User {user_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


@router.get("", response_model=PostPage, summary="List posts with like and comment counts")
async def list_posts(
    page: int = Query(1, ge=1, le=MAX_ID),
    per_page: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    db: AsyncSession = Depends(get_db),
):
    """
    Return one page of posts, each with its author and like/comment totals,
    wrapped in a page envelope.
    """
    logger.info(f"Listing posts (page={page}, per_page={per_page})")
    posts, total = await post_crud.get_posts_page(db, skip=(page - 1) * per_page, limit=per_page)
    logger.info(f"Listed {len(posts)} of {total} posts")
    return PostPage(
        current_page=page,
        per_page=per_page,
        total=total,
        last_page=max(1, math.ceil(total / per_page)),
        data=[PostWithCounts.model_validate(p) for p in posts],
    )


@router.get("/user/{id_user}", response_model=List[PostWithUser], summary="Posts written by a user")
async def list_posts_by_user(
    id_user: int = Path(..., ge=1, le=MAX_ID),
    page: int = Query(1, ge=1, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
):
    logger.info(f"Listing posts of user {id_user}")
    await _ensure_user_exists(db, id_user)
    per_page = settings.DEFAULT_PAGE_SIZE
    return await post_crud.get_posts_by_user(db, id_user, skip=(page - 1) * per_page, limit=per_page)


@router.get("/likes/{id_user}", response_model=List[PostWithCounts], summary="Posts liked by a user")
async def list_posts_liked_by_user(
    id_user: int = Path(..., ge=1, le=MAX_ID),
    page: int = Query(1, ge=1, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
):
    """
    Return the posts a user has liked, each with like/comment totals.
    """
    logger.info(f"Listing posts liked by user {id_user}")
    await _ensure_user_exists(db, id_user)
    per_page = settings.DEFAULT_PAGE_SIZE
    return await post_crud.get_posts_liked_by_user(db, id_user, skip=(page - 1) * per_page, limit=per_page)


@router.get("/{post_id}", response_model=PostDetail, summary="Show a post")
async def get_post(post_id: int = Path(..., ge=1, le=MAX_ID), db: AsyncSession = Depends(get_db)):
    db_post = await post_crud.get_post_detail(db, post_id)
    if db_post is None:
        logger.warning(f"Post {post_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return db_post


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED, summary="Create a post")
async def create_post(
    post_in: PostCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Create a post owned by the authenticated user.
    """
    logger.info(f"Creating post for user {current_user.id}")
    db_post = await post_crud.create_post(db, post_in, user_id=current_user.id)
    logger.info(f"Post {db_post.id} created")
    return db_post


@router.put("/{post_id}", response_model=PostRead, summary="Update a post")
async def update_post(
    post_in: PostUpdate,
    post_id: int = Path(..., ge=1, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
):
    logger.info(f"Updating post {post_id}")
    db_post = await _get_post_or_404(db, post_id)
    db_post = await post_crud.update_post(db, db_post, post_in)
    logger.info(f"Post {post_id} updated")
    return db_post


@router.delete("/{post_id}", response_model=PostRead, summary="Delete a post")
async def delete_post(post_id: int = Path(..., ge=1, le=MAX_ID), db: AsyncSession = Depends(get_db)):
    """
    Delete a post and return it as it was before deletion.
    """
    logger.info(f"Deleting post {post_id}")
    db_post = await _get_post_or_404(db, post_id)
    db_post = await post_crud.delete_post(db, db_post)
    logger.info(f"Post {post_id} deleted")
    return db_post
