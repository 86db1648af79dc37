"""Pydantic models for API request/response."""

from datetime import datetime
from pydantic import BaseModel, EmailStr, Field


class ContactRequest(BaseModel):
    """Request model for a contact-form submission."""
    name: str = Field(..., min_length=1)
    # Free text, stored and mailed exactly as submitted
    email: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    # Kept as text: leading zeros, "+", spaces and dashes are meaningful
    phone: str = Field(..., min_length=1)


class SignupRequest(BaseModel):
    """Request model for user registration.

    Account emails are syntax-checked and normalized (domain lowercased),
    the same way as in LoginRequest.
    """
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    """Request model for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    token: str


class UserResponse(BaseModel):
    """Public view of a user; never carries the password hash."""
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
