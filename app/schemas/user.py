"""User account payload used to register blog owners."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.configs.settings import MAX_LOGIN_LENGTH


class UserCreate(BaseModel):
    """User creation model (excludes auto-generated fields)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    login: str = Field(
        ...,
        min_length=1,
        max_length=MAX_LOGIN_LENGTH,
        pattern=r"^[a-zA-Z0-9!$&*+=?^_`{|}~.@-]+$",
        description="Login",
        examples=["johndoe"],
    )
    email: EmailStr | None = Field(default=None, examples=["johndoe@example.com"])
    first_name: str | None = Field(alias="firstName", default=None, max_length=50)
    last_name: str | None = Field(alias="lastName", default=None, max_length=50)
