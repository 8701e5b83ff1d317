# app/dependencies/dependencies.py

"""Application dependencies: caller identity and repositories."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.configs import settings
from app.db import get_session
from app.errors.auth import UserAuthenticationError
from app.managers.token_manager import decode_access_token
from app.repositories import BlogRepository, UserRepository

# A missing header is not an error: anonymous callers compare as "".
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_PREFIX}/authenticate",
    auto_error=False,
)


async def get_current_login(
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> str | None:
    """
    Resolve the caller's authenticated login.

    Parameters
    ----------
    token : str | None
        Bearer token from the `Authorization` header, if any.

    Returns
    -------
    str | None
        The token subject, or None when no valid token was presented.
    """
    if not token:
        return None
    token_data = decode_access_token(token)
    return token_data.login if token_data else None


async def get_required_login(
    login: Annotated[str | None, Depends(get_current_login)],
) -> str:
    """
    Resolve the caller's login, failing when there is none.

    Parameters
    ----------
    login : str | None
        Login resolved by `get_current_login`.

    Returns
    -------
    str
        The caller's login.

    Raises
    ------
    UserAuthenticationError
        If the request carries no valid bearer token.
    """
    if not login:
        raise UserAuthenticationError("Could not validate credentials")
    return login


CurrentLoginDep = Annotated[str | None, Depends(get_current_login)]
RequiredLoginDep = Annotated[str, Depends(get_required_login)]


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_blog_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


@dataclass(frozen=True)
class BlogOpsDeps:
    """
    Dependencies for blog operations.

    Both repositories share the request's session, hence its transaction.
    """

    repo: BlogRepoDep
    users: UserRepoDep
    login: CurrentLoginDep
