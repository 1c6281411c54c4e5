"""
Email/password authentication routes that issue JWT bearer tokens.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_db
from ..db.models.user import User
from ..core.config import settings
from ..core.security import create_access_token, get_password_hash, verify_password
from ..core.validators import validate_password
from ..crud import user as user_crud
from ..schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from ..schemas.user import UserRead
from .dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register with Email/Password"
)
async def register(
    registration: RegisterRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Register a new user with name, email and password.

    Raises:
        HTTPException: 400 if the email is taken or the password is too weak
    """
    email = registration.email.lower().strip()
    logger.info(f"[AUTH] Registration attempt for email: {email}")

    is_valid, message = validate_password(registration.password)
    if not is_valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)

    if await user_crud.get_user_by_email(db, email):
        logger.warning(f"[AUTH] Email already registered: {email}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

    user = await user_crud.create_user(
        db,
        name=registration.name,
        email=email,
        password_hash=get_password_hash(registration.password),
    )
    logger.info(f"[AUTH] New user created: {user.id}")
    return user


@router.post("/login", response_model=TokenResponse, summary="Login with Email/Password")
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Exchange email and password for a bearer token.

    Raises:
        HTTPException: 401 if the email is unknown or the password is wrong
    """
    email = credentials.email.lower().strip()
    logger.info(f"[AUTH] Login attempt for email: {email}")

    user = await user_crud.get_user_by_email(db, email)
    if not user or not verify_password(credentials.password, user.password_hash):
        logger.warning(f"[AUTH] Invalid credentials for: {email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info(f"[AUTH] Token issued for user: {user.id}")
    return TokenResponse(
        access_token=create_access_token(user.id),
        expires_in=settings.JWT_EXPIRATION_MINUTES * 60,
    )


@router.get("/me", response_model=UserRead, summary="Current user")
async def read_users_me(current_user: User = Depends(get_current_user)):
    """Retrieve the details of the currently authenticated user."""
    return current_user
