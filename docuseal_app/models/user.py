"""
User and session models.

Users are Firestore documents; audit keys written alongside them
(e.g. ``created_by``) are not read back.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr


class UserBase(BaseModel):
    email: EmailStr
    name: Optional[str] = None


class SignupRequest(UserBase):
    """Body of POST /api/auth/signup."""
    password: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserResponse(UserBase):
    """Public view of a user (no password hash)."""
    id: str
    created_at: datetime


class UserInDB(UserBase):
    """A user document as loaded from the store."""
    id: str
    password_hash: str
    created_at: datetime

    def to_response(self) -> UserResponse:
        return UserResponse(id=self.id, email=self.email, name=self.name, created_at=self.created_at)


class Token(BaseModel):
    """Bearer token issued on login."""
    access_token: str
    token_type: str = "bearer"


class TokenData(BaseModel):
    """Claims read back from a session token."""
    user_id: str
    email: str
