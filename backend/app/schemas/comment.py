"""
Pydantic schemas for comments.
"""
from pydantic import BaseModel, Field
from datetime import datetime

from app.db.base import MAX_ID


class CommentCreate(BaseModel):
    post_id: int = Field(..., ge=1, le=MAX_ID, description="ID of the commented post")
    user_id: int = Field(..., ge=1, le=MAX_ID, description="ID of the comment author")
    content: str = Field(..., min_length=1, max_length=10000)


class CommentUpdate(BaseModel):
    content: str = Field(..., min_length=1, max_length=10000)


class CommentRead(BaseModel):
    id: int
    post_id: int
    user_id: int
    content: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
