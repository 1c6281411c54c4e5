"""
Validation utilities for authentication data.
"""
from typing import Tuple

MIN_PASSWORD_LENGTH = 6


def validate_password(password: str) -> Tuple[bool, str]:
    """
    Validate password strength.

    Args:
        password: Password to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not password:
        return False, "Password is required"

    if len(password) < MIN_PASSWORD_LENGTH:
        return False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"

    # bcrypt only looks at the first 72 bytes
    if len(password.encode("utf-8")) > 72:
        return False, "Password must be at most 72 bytes long"

    return True, ""
