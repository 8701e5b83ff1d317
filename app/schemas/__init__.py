from app.schemas.auth import TokenData
from app.schemas.blog import BlogCreate, BlogResponse, BlogUpdate, UserRef
from app.schemas.health import HealthCheckResponse
from app.schemas.user import UserCreate

__all__ = [
    "BlogCreate",
    "BlogResponse",
    "BlogUpdate",
    "HealthCheckResponse",
    "TokenData",
    "UserCreate",
    "UserRef",
]
