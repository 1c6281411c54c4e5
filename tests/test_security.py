from datetime import timedelta

from jose import jwt

from app.core.config import settings
from app.core.security import create_access_token, verify_token
from app.core.validators import validate_password


def test_token_subject_is_user_id():
    token = create_access_token(42)
    assert verify_token(token) == 42


def test_expired_token_is_rejected():
    token = create_access_token(42, expires_delta=timedelta(seconds=-1))
    assert verify_token(token) is None


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": "42"}, "some-other-key", algorithm=settings.JWT_ALGORITHM)
    assert verify_token(token) is None


def test_token_without_numeric_subject_is_rejected():
    no_sub = jwt.encode({"name": "x"}, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    text_sub = jwt.encode({"sub": "alice"}, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    assert verify_token(no_sub) is None
    assert verify_token(text_sub) is None


def test_password_rules():
    assert validate_password("secret123") == (True, "")
    assert validate_password("")[0] is False
    assert validate_password("12345")[0] is False
    assert validate_password("x" * 73)[0] is False
