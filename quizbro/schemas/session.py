"""
Pydantic schemas for sign-up, sign-in and the current session
"""
from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID


class Role(str, Enum):
    TEACHER = "teacher"
    STUDENT = "student"
    UNKNOWN = "unknown"


class SignUpRequest(BaseModel):
    """Schema for registering a new account"""
    email: str = Field(..., max_length=255)
    password: str
    confirm_password: Optional[str] = None
    role: str = "student"


class SignInRequest(BaseModel):
    email: str = Field(..., max_length=255)
    password: str


class SessionInfo(BaseModel):
    """Current identity handed to the dashboards"""
    user_id: UUID
    email: str
    role: Role
    token: Optional[str] = None


class SignOutResponse(BaseModel):
    message: str
