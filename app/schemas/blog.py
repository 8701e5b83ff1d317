"""
Blog payload models.

`BlogCreate` and `BlogUpdate` are the request bodies of the POST and PUT
endpoints; both carry the owner as a `UserRef`. `BlogResponse` is what the
endpoints return for a persisted blog.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.configs.settings import (
    ENTITY_NAME,
    MAX_FIELD_LENGTH,
    MAX_LOGIN_LENGTH,
    MIN_HANDLE_LENGTH,
    MIN_NAME_LENGTH,
)
from app.errors.alert import BadRequestAlertError


class UserRef(BaseModel):
    """Reference to a blog owner as it appears on the wire."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(default=None, description="User ID")
    login: str = Field(
        ...,
        min_length=1,
        max_length=MAX_LOGIN_LENGTH,
        description="Owner login",
        examples=["johndoe"],
    )


class BlogBase(BaseModel):
    """Fields shared by every blog payload."""

    name: str = Field(
        ...,
        min_length=MIN_NAME_LENGTH,
        max_length=MAX_FIELD_LENGTH,
        description="Display name",
        examples=["Travel notes"],
    )
    handle: str = Field(
        ...,
        min_length=MIN_HANDLE_LENGTH,
        max_length=MAX_FIELD_LENGTH,
        description="Short name",
        examples=["travel"],
    )

    @field_validator("name", "handle", mode="after")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        """Reject values made only of whitespace."""
        if not v.strip():
            mssg = "Value must not be blank"
            raise ValueError(mssg)
        return v


class BlogCreate(BlogBase):
    """
    Blog creation payload.

    A payload carrying an `id` is rejected with 400 `idexists` before any
    field is validated, so the reason code does not depend on the rest of
    the payload.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Travel notes",
                "handle": "travel",
                "user": {"id": 1, "login": "johndoe"},
            },
        },
    )

    id: int | None = Field(default=None, description="Must be absent on creation")
    user: UserRef = Field(..., description="Declared owner")

    @model_validator(mode="before")
    @classmethod
    def reject_id(cls, data: Any) -> Any:
        """Raise `BadRequestAlertError` (idexists) when an id is present."""
        if isinstance(data, dict) and data.get("id") is not None:
            raise BadRequestAlertError(
                "A new blog cannot already have an ID",
                ENTITY_NAME,
                "idexists",
            )
        return data


class BlogUpdate(BlogBase):
    """
    Blog update payload (full replacement of name, handle and owner).

    A payload without an `id` is rejected with 400 `idnull` before any field
    is validated.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Travel notes 2025",
                "handle": "travel",
                "user": {"id": 1, "login": "johndoe"},
            },
        },
    )

    id: int = Field(..., description="Identifier of the blog to update")
    user: UserRef = Field(..., description="Owner after the update")

    @model_validator(mode="before")
    @classmethod
    def require_id(cls, data: Any) -> Any:
        """Raise `BadRequestAlertError` (idnull) when the id is missing."""
        if isinstance(data, dict) and data.get("id") is None:
            raise BadRequestAlertError("Invalid id", ENTITY_NAME, "idnull")
        return data


class BlogResponse(BlogBase):
    """Persisted blog as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user: UserRef | None = None
