"""
Like model.
"""
from sqlalchemy import Column, Integer, ForeignKey

from ..base import Base, TimestampMixin


class Like(Base, TimestampMixin):
    """
    A like given by a user to a post.

    No unique constraint on (post_id, user_id): removal deletes the first
    matching row only.
    """
    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
