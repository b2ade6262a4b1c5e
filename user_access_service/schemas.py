"""Pydantic schemas for request and response models of the user access service.

Includes the registration request/response pair and the profile record
exchanged between the orchestration layer and its record stores.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for registration requests.

    Both fields are optional at parse time; the endpoint rejects missing or
    empty values itself so that the answer is always ``400``.
    """

    model_config = ConfigDict(extra="ignore")

    username: Optional[str] = None
    password: Optional[str] = None


class UserCreated(BaseModel):
    """Schema returned after a successful registration."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    user_id: int = Field(alias="userId")


class UserProfile(BaseModel):
    """Display profile handled by :class:`~user_access_service.user_service.UserService`."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
