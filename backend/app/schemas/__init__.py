"""
Pydantic schemas for the application.
"""
from app.schemas import auth
from app.schemas import user
from app.schemas import post
from app.schemas import comment
from app.schemas import like

__all__ = ["auth", "user", "post", "comment", "like"]
