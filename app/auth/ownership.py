"""Ownership checks for user-owned resources."""

from logging import getLogger

from app.configs import file_logger
from app.errors.alert import ForbiddenError
from app.models import BlogDB
from app.schemas.blog import UserRef

logger = file_logger(getLogger(__name__))


def is_owner(owner_login: str | None, current_login: str | None) -> bool:
    """
    Check whether the caller may act on a resource.

    A resource without an owner is open to everyone; otherwise the owner's
    login must equal the caller's login, an anonymous caller counting as "".

    Args:
        owner_login: Login of the resource owner, None when unowned
        current_login: Caller's authenticated login, None when anonymous

    Returns:
        bool: True if access is allowed
    """
    if owner_login is None:
        return True
    return owner_login == (current_login or "")


def check_owner(owner_login: str | None, current_login: str | None) -> None:
    """
    Raise `ForbiddenError` unless the caller owns the resource.

    Raises:
        ForbiddenError: If the owner's login differs from the caller's
    """
    if not is_owner(owner_login, current_login):
        logger.warning(f"Ownership check failed for login '{current_login or ''}'")
        raise ForbiddenError


def check_blog_owner(blog: BlogDB, current_login: str | None) -> None:
    """Guard a stored blog against access by anyone but its current owner."""
    check_owner(blog.user.login if blog.user else None, current_login)


def check_payload_owner(user: UserRef, current_login: str | None) -> None:
    """Guard an incoming payload whose declared owner must be the caller."""
    check_owner(user.login, current_login)
