"""
CRUD operations for the application.
"""
from app.crud import user
from app.crud import post
from app.crud import comment
from app.crud import like

__all__ = ["user", "post", "comment", "like"]
