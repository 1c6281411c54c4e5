"""
Pydantic schemas for likes.
"""
from pydantic import BaseModel, Field
from datetime import datetime

from app.db.base import MAX_ID


class LikeRequest(BaseModel):
    """Body of both give and remove like requests."""
    post_id: int = Field(..., ge=1, le=MAX_ID, description="ID of the liked post")
    user_id: int = Field(..., ge=1, le=MAX_ID, description="ID of the user whose like it is")


class LikeRead(BaseModel):
    id: int
    post_id: int
    user_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class LikeCount(BaseModel):
    post_id: int
    likes: int
