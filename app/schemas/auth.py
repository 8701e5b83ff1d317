from uuid import UUID

from pydantic import BaseModel


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    login: str
    user_id: int
    jti: UUID
    token_type: str
