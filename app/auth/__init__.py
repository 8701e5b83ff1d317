"""Authentication and authorization module."""

from app.auth.ownership import check_blog_owner, check_owner, check_payload_owner, is_owner

__all__ = [
    "check_blog_owner",
    "check_owner",
    "check_payload_owner",
    "is_owner",
]
