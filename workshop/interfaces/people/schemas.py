"""
Pydantic schemas for people API request/response validation.

These schemas enforce input validation and define the API contract.
JSON field names are camelCase; Python attributes stay snake_case.
No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from workshop.domain.people.entities import FIRST_NAME_NOT_EMPTY, LAST_NAME_NOT_EMPTY


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonRequest(CamelModel):
    """Request schema for creating or renaming a person.

    Attributes:
        first_name: Non-empty first name.
        last_name: Non-empty last name.
    """

    first_name: str = Field(..., description="Person's first name")
    last_name: str = Field(..., description="Person's last name")

    @field_validator("first_name")
    @classmethod
    def _first_name_not_empty(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("not_empty", FIRST_NAME_NOT_EMPTY)
        return value

    @field_validator("last_name")
    @classmethod
    def _last_name_not_empty(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("not_empty", LAST_NAME_NOT_EMPTY)
        return value


class PersonResponse(CamelModel):
    """Response schema for a single person."""

    id: str
    first_name: str
    last_name: str


class PersonPageResponse(CamelModel):
    """Response schema for one page of people."""

    items: list[PersonResponse]
    page: int
    size: int
    total_count: int
    total_pages: int


class ProblemResponse(BaseModel):
    """Problem detail body returned for every error (RFC 7807)."""

    type: str = "about:blank"
    title: str
    status: int
    detail: str
    instance: str | None = None


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
