"""Blog database model using SQLModel."""

from typing import cast

from pydantic import ConfigDict
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, Relationship, SQLModel, String

from app.configs.settings import MAX_FIELD_LENGTH
from app.models.user import UserDB


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    Each blog belongs to exactly one user through `user_id`; the owner row
    is loaded eagerly so ownership checks never trigger lazy IO.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    # Primary key, assigned by the store
    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Blog ID",
    )

    name: str = Field(
        sa_column=Column(String(MAX_FIELD_LENGTH), nullable=False),
        description="Display name",
    )
    handle: str = Field(
        sa_column=Column(String(MAX_FIELD_LENGTH), nullable=False),
        description="Short name",
    )

    # Foreign key to User
    user_id: int = Field(
        sa_column=Column(
            "user_id",
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )

    user: UserDB | None = Relationship(sa_relationship_kwargs={"lazy": "selectin"})

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Travel notes",
                "handle": "travel",
                "user_id": 1,
            },
        },
    )
