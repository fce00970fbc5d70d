from pydantic import EmailStr, Field
from typing import Optional

from app.core.schemas import CamelModel
from app.modules.users.models import UserRole


# Registration
class UserRegistrationRequest(CamelModel):
    """Account registration request"""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    role: UserRole
    occupation: Optional[str] = Field(None, max_length=100)
    contact_number: Optional[str] = Field(None, max_length=20)


# Login
class UserLoginRequest(CamelModel):
    """Login with email and password"""
    email: str
    password: str


class UserPublic(CamelModel):
    """Profile fields safe to return to clients"""
    id: str
    name: str
    email: str
    role: UserRole
    occupation: Optional[str] = None
    contact_number: Optional[str] = None


class LoginResponse(CamelModel):
    """Bearer token plus the caller's profile"""
    token: str
    user: UserPublic
