"""Pydantic models for sign-up, sign-in and session responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from iam.application.value_objects import SessionIdentity


class RegisterRequest(BaseModel):
    """Request model for creating an account.

    Fields default to empty strings so that missing values are reported by
    the identity store's own field validation.
    """

    username: str = Field(default="", description="Unique sign-in handle")
    password: str = Field(default="", description="Plaintext password")
    email: str = Field(default="", description="Contact email address")


class LoginRequest(BaseModel):
    """Request model for signing in."""

    username: str = Field(default="", description="Sign-in handle")
    password: str = Field(default="", description="Plaintext password")


class SessionResponse(BaseModel):
    """The identity now bound to the client session."""

    user_id: str = Field(..., description="User ID (ULID format)")
    username: str = Field(..., description="Username")

    @classmethod
    def from_identity(cls, identity: SessionIdentity) -> SessionResponse:
        """Convert a session identity to API response."""
        return cls(user_id=identity.user_id.value, username=identity.username)
