"""Pydantic models for Users API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from users.domain.aggregates import User


class CreateUserRequest(BaseModel):
    """Request model for creating a user."""

    username: str = Field(..., description="Username", min_length=1)


class UserResponse(BaseModel):
    """Response model for user."""

    id: str = Field(..., description="User ID (UUID)")
    username: str = Field(..., description="Username")

    @classmethod
    def from_domain(cls, user: User) -> UserResponse:
        """Convert domain User aggregate to API response.

        Args:
            user: User domain aggregate

        Returns:
            UserResponse
        """
        return cls(id=user.id.value, username=user.username)
