"""Domain Entities - Auth"""
from pydantic import BaseModel, Field
from uuid import uuid4
from datetime import datetime
from typing import Optional


class User(BaseModel):
    """User Entity"""
    uid: str = Field(default_factory=lambda: uuid4().hex)
    email: Optional[str] = None
    display_name: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserInDB(User):
    """User with hashed password for identity storage"""
    hashed_password: Optional[str] = None
    provider: str = "password"


class ExternalProfile(BaseModel):
    """Identity asserted by an external login provider"""
    provider: str = "google"
    subject: str
    email: str
    display_name: Optional[str] = None


class AuthResult(BaseModel):
    """Outcome of an identity operation"""
    success: bool
    error: Optional[str] = None
    user: Optional[User] = None
    session_id: Optional[str] = None

    @classmethod
    def ok(cls, user: Optional[User] = None, session_id: Optional[str] = None) -> "AuthResult":
        return cls(success=True, user=user, session_id=session_id)

    @classmethod
    def failed(cls, error: str) -> "AuthResult":
        return cls(success=False, error=error)
