"""
Pydantic schemas for posts.
"""
from typing import List
from pydantic import BaseModel, Field
from datetime import datetime

from app.schemas.user import UserRead


class PostBase(BaseModel):
    """Base schema for post data."""
    title: str = Field(..., min_length=1, max_length=255, description="Title of the post")
    content: str = Field(..., min_length=1, max_length=10000, description="Body of the post")


class PostCreate(PostBase):
    """Schema for creating a new post. The author comes from the bearer token."""
    pass


class PostUpdate(PostBase):
    """Schema for updating an existing post."""
    pass


class PostRead(PostBase):
    """Schema for post data as stored in the database."""
    id: int = Field(..., description="Database ID of the post")
    user_id: int = Field(..., description="ID of the user who created the post")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    class Config:
        from_attributes = True


class PostWithUser(PostRead):
    """Post together with its author."""
    user: UserRead


class PostDetail(PostWithUser):
    """Single post view with its like total."""
    count_likes: int = Field(0, description="Number of likes on the post")


class PostWithCounts(PostDetail):
    """Listing item with like and comment totals."""
    count_comments: int = Field(0, description="Number of comments on the post")


class PostPage(BaseModel):
    """Page envelope for the post listing."""
    current_page: int
    per_page: int
    total: int
    last_page: int
    data: List[PostWithCounts]
