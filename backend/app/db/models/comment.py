"""
Comment model.
"""
from sqlalchemy import Column, Integer, Text, ForeignKey

from ..base import Base, TimestampMixin


class Comment(Base, TimestampMixin):
    """A comment left on a post."""
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
