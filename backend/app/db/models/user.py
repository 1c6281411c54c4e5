"""
User model for authentication.
"""
from sqlalchemy import Column, Integer, String

from ..base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """
    Blog user. Posts, comments and likes reference it by id.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
