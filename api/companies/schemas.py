"""
Company API schemas (request models and query-string filters).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CompanyCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    handle: str = Field(..., min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$")
    name: str = Field(..., min_length=1)
    description: str = ""
    num_employees: int | None = Field(default=None, alias="numEmployees", ge=0)
    logo_url: str | None = Field(default=None, alias="logoUrl")


class CompanyUpdateRequest(BaseModel):
    """
    Partial update: only fields the client sent are changed.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    num_employees: int | None = Field(default=None, alias="numEmployees", ge=0)
    logo_url: str | None = Field(default=None, alias="logoUrl")

    @field_validator("name", "description")
    @classmethod
    def _not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("may not be null")
        return value


class CompanyFilters(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    min_employees: int | None = Field(default=None, alias="minEmployees", ge=0)
    max_employees: int | None = Field(default=None, alias="maxEmployees", ge=0)
