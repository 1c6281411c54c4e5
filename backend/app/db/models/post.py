"""
Post model for blog posts.
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from ..base import Base, TimestampMixin


class Post(Base, TimestampMixin):
    """
    Blog post owned by the user who created it.

    Like and comment totals are not stored; the post queries attach them
    as ``count_likes`` / ``count_comments`` when they are requested.
    """
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)

    # Relationships
    user = relationship("User")
