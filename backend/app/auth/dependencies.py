"""
Authentication dependencies for FastAPI.
"""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from app.db.session import get_db
from app.db.models.user import User
from app.crud import user as user_crud
from app.core import security

# Configure logging
logger = logging.getLogger(__name__)

# Bearer scheme; missing headers are reported as 401 below instead of 403
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db)
) -> User:
    """
    Validate the bearer JWT and return the user it was issued to.

    Args:
        credentials: The parsed Authorization header
        db: Database session

    Returns:
        User: The current authenticated user

    Raises:
        HTTPException: If authentication fails
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    # If no token is provided, raise exception
    if credentials is None or not credentials.credentials:
        raise credentials_exception

    user_id = security.verify_token(credentials.credentials)
    if user_id is None:
        logger.warning("Rejected request with an invalid or expired token")
        raise credentials_exception

    user = await user_crud.get_user(db, user_id)
    if not user:
        logger.warning(f"Token subject {user_id} does not match any user")
        raise credentials_exception

    return user
