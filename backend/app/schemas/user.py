from pydantic import BaseModel, EmailStr
from datetime import datetime

class UserRead(BaseModel):
    """Schema for reading user details."""
    id: int
    name: str
    email: EmailStr
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
