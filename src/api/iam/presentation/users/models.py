"""Pydantic models for the caller's own profile."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from iam.domain.aggregates import User


class UpdateProfileRequest(BaseModel):
    """Request model for changing password and email.

    The username is not editable and is therefore not accepted here.
    """

    password: str = Field(default="", description="New password, at least 4 characters")
    email: str = Field(default="", description="New contact email address")


class ProfileResponse(BaseModel):
    """Response model for a user profile. Never includes the credential hash."""

    id: str = Field(..., description="User ID (ULID format)")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="Contact email address")
    created_at: datetime = Field(..., description="Registration timestamp")

    @classmethod
    def from_domain(cls, user: User) -> ProfileResponse:
        """Convert domain User aggregate to API response.

        Args:
            user: User domain aggregate

        Returns:
            ProfileResponse without credential material
        """
        return cls(
            id=user.id.value,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )
