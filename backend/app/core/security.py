from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

# Import passlib for hashing
from passlib.context import CryptContext

from .config import settings

# --- Hashing Setup ---
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
# --- End Hashing Setup ---


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a signed JWT whose subject is the user's id.
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> Optional[int]:
    """
    Decode a bearer token.

    Returns:
        The user id from the ``sub`` claim, or None if the token is invalid,
        expired or carries no usable subject.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None

    subject = payload.get("sub")
    if subject is None:
        return None
    try:
        return int(subject)
    except (TypeError, ValueError):
        return None
