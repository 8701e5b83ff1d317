"""User database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from app.configs.settings import MAX_LOGIN_LENGTH


class UserDB(SQLModel, table=True):
    """
    User database model.

    Blogs only read `login` and identity from it; the remaining columns
    belong to the identity provider's account record.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    # Primary key
    id: int | None = Field(
        default=None,
        primary_key=True,
        description="User ID",
    )

    # Required fields
    login: str = Field(
        sa_column=Column(String(MAX_LOGIN_LENGTH), unique=True, nullable=False, index=True),
        description="Login (unique)",
    )

    # Optional profile fields
    email: str | None = Field(
        default=None,
        sa_column=Column(String(254), unique=True),
        description="Email address (unique)",
    )
    first_name: str | None = Field(
        default=None,
        sa_column=Column(String(50)),
        description="User first name",
    )
    last_name: str | None = Field(
        default=None,
        sa_column=Column(String(50)),
        description="User last name",
    )

    activated: bool = Field(
        default=True,
        nullable=False,
        description="Whether the account is activated",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "login": "johndoe",
                "email": "johndoe@example.com",
                "first_name": "John",
                "last_name": "Doe",
                "activated": True,
            },
        },
    )
