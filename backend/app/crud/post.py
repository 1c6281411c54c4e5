"""
CRUD operations for posts.
"""
from typing import List, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy import delete, func, select
from app.db.models.comment import Comment
from app.db.models.like import Like
from app.db.models.post import Post
from app.schemas.post import PostCreate, PostUpdate

# Correlated count subqueries, evaluated per Post row
likes_count = (
    select(func.count(Like.id))
    .where(Like.post_id == Post.id)
    .correlate(Post)
    .scalar_subquery()
)
comments_count = (
    select(func.count(Comment.id))
    .where(Comment.post_id == Post.id)
    .correlate(Post)
    .scalar_subquery()
)


def _attach_counts(rows) -> List[Post]:
    """Copy the labelled count columns of each row onto its Post."""
    posts = []
    for row in rows:
        post = row.Post
        post.count_likes = row.count_likes
        post.count_comments = row.count_comments
        posts.append(post)
    return posts


def _with_counts():
    return (
        select(
            Post,
            likes_count.label("count_likes"),
            comments_count.label("count_comments"),
        )
        .options(selectinload(Post.user))
    )


async def create_post(db: AsyncSession, post_in: PostCreate, user_id: int) -> Post:
    """
    Create a new post.

    Args:
        db: Database session
        post_in: Post data
        user_id: ID of the authenticated author

    Returns:
        Post: Created post
    """
    db_post = Post(**post_in.model_dump(), user_id=user_id)
    db.add(db_post)
    # Flush to send changes to DB within the transaction
    await db.flush()
    # Refresh to get the generated ID and timestamps
    await db.refresh(db_post)
    return db_post


async def get_post(db: AsyncSession, post_id: int) -> Optional[Post]:
    """
    Get a post by ID.

    Args:
        db: Database session
        post_id: Post ID

    Returns:
        Optional[Post]: Post if found, None otherwise
    """
    result = await db.execute(select(Post).where(Post.id == post_id))
    return result.scalar_one_or_none()


async def get_post_detail(db: AsyncSession, post_id: int) -> Optional[Post]:
    """
    Get a post by ID with its author loaded and ``count_likes`` set.
    """
    result = await db.execute(
        select(Post, likes_count.label("count_likes"))
        .options(selectinload(Post.user))
        .where(Post.id == post_id)
    )
    row = result.first()
    if row is None:
        return None
    post = row.Post
    post.count_likes = row.count_likes
    return post


async def get_posts_page(
    db: AsyncSession,
    skip: int = 0,
    limit: int = 10
) -> Tuple[List[Post], int]:
    """
    Get one page of posts with author and like/comment totals.

    Args:
        db: Database session
        skip: Number of posts to skip
        limit: Maximum number of posts to return

    Returns:
        Tuple[List[Post], int]: The page of posts and the total number of posts
    """
    total = (await db.execute(select(func.count(Post.id)))).scalar_one()
    result = await db.execute(_with_counts().order_by(Post.id).offset(skip).limit(limit))
    return _attach_counts(result.all()), total


async def get_posts_by_user(
    db: AsyncSession,
    user_id: int,
    skip: int = 0,
    limit: int = 10
) -> List[Post]:
    """
    Get posts written by a user, with the author loaded.
    """
    result = await db.execute(
        select(Post)
        .options(selectinload(Post.user))
        .where(Post.user_id == user_id)
        .order_by(Post.id)
        .offset(skip)
        .limit(limit)
    )
    return list(result.scalars().all())


async def get_posts_liked_by_user(
    db: AsyncSession,
    user_id: int,
    skip: int = 0,
    limit: int = 10
) -> List[Post]:
    """
    Get the distinct posts a user has liked, with like/comment totals.

    A post liked more than once by the same user is still returned once.
    """
    liked_post_ids = select(Like.post_id).where(Like.user_id == user_id)
    result = await db.execute(
        _with_counts()
        .where(Post.id.in_(liked_post_ids))
        .order_by(Post.id)
        .offset(skip)
        .limit(limit)
    )
    return _attach_counts(result.all())


async def update_post(db: AsyncSession, db_post: Post, post_in: PostUpdate) -> Post:
    """
    Overwrite title and content of an existing post.
    """
    db_post.title = post_in.title
    db_post.content = post_in.content
    await db.flush()
    # updated_at is set server side
    await db.refresh(db_post)
    return db_post


async def delete_post(db: AsyncSession, db_post: Post) -> Post:
    """
    Delete a post together with its comments and likes.

    Returns:
        Post: The deleted post, attributes as last loaded
    """
    await db.execute(delete(Comment).where(Comment.post_id == db_post.id))
    await db.execute(delete(Like).where(Like.post_id == db_post.id))
    await db.delete(db_post)
    await db.flush()
    return db_post
