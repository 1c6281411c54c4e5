"""
Authentication schemas for email/password login.
"""
from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request model for email/password registration."""
    name: str = Field(..., min_length=1, max_length=255, description="User display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class LoginRequest(BaseModel):
    """Request model for email/password login."""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class TokenResponse(BaseModel):
    """Response model for a successful login."""
    access_token: str = Field(..., description="JWT for the Authorization: Bearer header")
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")
