"""
User API schemas (request models).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Something before and after a single "@"; the column CHECK requires the former.
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class UserCreateRequest(BaseModel):
    """
    Admin-only user creation; unlike /auth/register this may create admins.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=128)
    first_name: str = Field(..., alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=30)
    email: str = Field(..., min_length=6, max_length=60, pattern=EMAIL_PATTERN)
    is_admin: bool = Field(default=False, alias="isAdmin")


class UserUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    first_name: str | None = Field(default=None, alias="firstName", min_length=1, max_length=30)
    last_name: str | None = Field(default=None, alias="lastName", min_length=1, max_length=30)
    password: str | None = Field(default=None, min_length=5, max_length=128)
    email: str | None = Field(default=None, min_length=6, max_length=60, pattern=EMAIL_PATTERN)
    is_admin: bool | None = Field(default=None, alias="isAdmin")

    @field_validator("first_name", "last_name", "password", "email", "is_admin")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value
