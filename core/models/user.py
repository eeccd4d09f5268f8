"""User data models."""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class RegisterRequest(BaseModel):
    """Registration payload. Fields are checked by the credential store so
    missing values come back as field-level 400s rather than 422s."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    location: Optional[str] = None
    phone_number: Optional[str] = None


class LoginRequest(BaseModel):
    """Login request model."""
    email: str
    password: str


class TokenResponse(BaseModel):
    """Login response model."""
    token: str


class UserPublic(BaseModel):
    """User record without sensitive information."""
    id: UUID
    name: str
    email: str
    location: Optional[str] = None
    phone_number: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserIdentity(BaseModel):
    """Claims recovered from a verified session token."""
    user_id: UUID
    role: str
