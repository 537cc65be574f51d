from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime
from app.models.user import UserRole

class UserResponse(BaseModel):
    id: int
    email: EmailStr
    full_name: str
    role: UserRole
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }

class UserUpdate(BaseModel):
    """Admin update of a user's account."""
    full_name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    role: UserRole
    is_active: bool

class ProfileUpdate(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=200)

class PasswordChange(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=1)
