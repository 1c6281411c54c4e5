"""
Import all models to ensure they are registered with SQLAlchemy.
"""
from ..base import Base
from .user import User
from .post import Post
from .comment import Comment
from .like import Like
