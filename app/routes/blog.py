# app/routes/blog.py

"""
Blog Routes.

REST resource for blogs owned by the authenticated caller.

Summary
-------
Endpoints include:
  - Create blog
  - Update blog
  - List the caller's blogs
  - Get blog by id
  - Delete blog

Authorization
-------------
Every operation that reveals or mutates a stored blog goes through the same
ownership guard (`app.auth.ownership`). Creation checks the payload's
declared owner instead. Failures are raised as `BadRequestAlertError`,
`ForbiddenError` or `RecordNotFoundError` and rendered by the application's
exception handlers.

Alerts
------
Successful mutations carry `X-{app}-alert` / `X-{app}-params` headers for
the client-side notifier.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from app.auth.ownership import check_blog_owner, check_payload_owner
from app.configs import ENTITY_NAME, file_logger, settings
from app.dependencies import BlogOpsDeps, BlogRepoDep, CurrentLoginDep, RequiredLoginDep
from app.errors.alert import BadRequestAlertError
from app.managers import limiter
from app.models import BlogDB, UserDB
from app.repositories import UserRepository
from app.schemas import BlogCreate, BlogResponse, BlogUpdate, UserRef
from app.utils.header_util import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)

router = APIRouter(prefix=f"{settings.API_PREFIX}/blogs", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

BlogIdPath = Annotated[int, Path(ge=1, description="Blog identifier")]

FORBIDDEN_RESPONSE = {
    "description": "Caller does not own the blog",
    "content": {"application/json": {"example": {"detail": "error.http.403"}}},
}
NOT_FOUND_RESPONSE = {
    "description": "Not found",
    "content": {"application/json": {"example": {"detail": "Blog with ID 1 not found"}}},
}
RATE_LIMIT_RESPONSE = {
    "description": "Rate limit exceeded",
    "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
}


def blog_to_response(db_blog: BlogDB, owner: UserDB | None = None) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.
    owner : UserDB | None
        Owner to report; defaults to the blog's loaded `user`.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    owner = owner or db_blog.user
    return BlogResponse(
        id=db_blog.id,
        name=db_blog.name,
        handle=db_blog.handle,
        user=UserRef(id=owner.id, login=owner.login) if owner else None,
    )


async def resolve_owner(users: UserRepository, user: UserRef) -> UserDB:
    """
    Look up the account a payload names as owner.

    Raises
    ------
    BadRequestAlertError
        If no account has that login.
    """
    owner = await users.get_by_login(user.login)
    if not owner:
        raise BadRequestAlertError("Owner does not exist", ENTITY_NAME, "usernotfound")
    return owner


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the caller. The payload must not carry an id.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "name": "Travel notes",
                        "handle": "travel",
                        "user": {"id": 1, "login": "johndoe"},
                    },
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "A new blog cannot already have an ID",
                        "entityName": "blog",
                        "errorKey": "idexists",
                        "message": "error.idexists",
                        "params": "blog",
                    },
                },
            },
        },
        403: FORBIDDEN_RESPONSE,
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_create",
)
@limiter.limit("10/minute")
async def create_blog(
    request: Request,
    response: Response,
    blog: Annotated[
        BlogCreate,
        Body(
            openapi_examples={
                "basic": {
                    "summary": "Basic blog creation",
                    "value": {
                        "name": "Travel notes",
                        "handle": "travel",
                        "user": {"login": "johndoe"},
                    },
                },
            },
        ),
    ],
    deps: Annotated[BlogOpsDeps, Depends()],
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object carrying the Location and alert headers.
    blog : BlogCreate
        Blog input payload.
    deps : BlogOpsDeps
        Repositories and the caller's login.

    Returns
    -------
    BlogResponse
        Created blog, including its generated id.

    Raises
    ------
    BadRequestAlertError
        If the declared owner does not exist. A payload carrying an id is
        rejected by `BlogCreate` (idexists) before this handler runs.
    ForbiddenError
        If the declared owner is not the caller.
    """
    logger.debug(f"REST request to save Blog : {blog}")
    check_payload_owner(blog.user, deps.login)

    owner = await resolve_owner(deps.users, blog.user)
    db_blog = await deps.repo.save(blog.name, blog.handle, owner.id)

    response.headers["Location"] = f"{settings.API_PREFIX}/blogs/{db_blog.id}"
    response.headers.update(
        create_entity_creation_alert(
            settings.CLIENT_APP_NAME,
            settings.ENABLE_TRANSLATION,
            ENTITY_NAME,
            str(db_blog.id),
        ),
    )
    return blog_to_response(db_blog, owner)


@router.put(
    "",
    response_class=ORJSONResponse,
    response_model=BlogUpdate,
    summary="Update blog",
    description=(
        "Update name, handle and owner of an existing blog. "
        "Only fields that differ from the stored blog are written."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "name": "Travel notes 2025",
                        "handle": "travel",
                        "user": {"id": 1, "login": "johndoe"},
                    },
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Invalid id",
                        "entityName": "blog",
                        "errorKey": "idnull",
                        "message": "error.idnull",
                        "params": "blog",
                    },
                },
            },
        },
        403: FORBIDDEN_RESPONSE,
        404: NOT_FOUND_RESPONSE,
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_update",
)
@limiter.limit("20/minute")
async def update_blog(
    request: Request,
    response: Response,
    blog: Annotated[
        BlogUpdate,
        Body(
            openapi_examples={
                "rename": {
                    "summary": "Rename a blog",
                    "value": {
                        "id": 1,
                        "name": "Travel notes 2025",
                        "handle": "travel",
                        "user": {"login": "johndoe"},
                    },
                },
            },
        ),
    ],
    deps: Annotated[BlogOpsDeps, Depends()],
) -> BlogUpdate:
    """
    Update an existing blog.

    Each changed field is written by its own single-column statement inside
    the request transaction.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object carrying the alert headers.
    blog : BlogUpdate
        Full blog payload including its id.
    deps : BlogOpsDeps
        Repositories and the caller's login.

    Returns
    -------
    BlogUpdate
        The submitted payload.

    Raises
    ------
    BadRequestAlertError
        If the new owner does not exist. A payload without an id is
        rejected by `BlogUpdate` (idnull) before this handler runs.
    ForbiddenError
        If the caller does not own the stored blog.
    RecordNotFoundError
        If no blog has that id.
    """
    logger.debug(f"REST request to update Blog : {blog}")

    stored = await deps.repo.get_or_raise(blog.id)
    check_blog_owner(stored, deps.login)
    stored_login = stored.user.login if stored.user else None

    if stored.name != blog.name:
        await deps.repo.update_field(blog.id, "name", blog.name)
    if stored.handle != blog.handle:
        await deps.repo.update_field(blog.id, "handle", blog.handle)
    if stored_login != blog.user.login:
        new_owner = await resolve_owner(deps.users, blog.user)
        await deps.repo.update_field(blog.id, "user_id", new_owner.id)

    response.headers.update(
        create_entity_update_alert(
            settings.CLIENT_APP_NAME,
            settings.ENABLE_TRANSLATION,
            ENTITY_NAME,
            str(blog.id),
        ),
    )
    return blog


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="Get the caller's blogs",
    description="Retrieve every blog owned by the authenticated caller.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": 1,
                            "name": "Travel notes",
                            "handle": "travel",
                            "user": {"id": 1, "login": "johndoe"},
                        },
                    ],
                },
            },
        },
        401: {
            "description": "Not authenticated",
            "content": {
                "application/json": {"example": {"detail": "Could not validate credentials"}},
            },
        },
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_get_all",
)
@limiter.limit("60/minute")
async def get_all_blogs(
    request: Request,
    login: RequiredLoginDep,
    repo: BlogRepoDep,
) -> list[BlogResponse]:
    """
    Get every blog owned by the caller.

    Parameters
    ----------
    request : Request
        Current request context.
    login : str
        Caller's login; the request fails with 401 without one.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    list[BlogResponse]
        The caller's blogs, ordered by id.
    """
    logger.debug("REST request to get all Blogs")
    db_blogs = await repo.find_by_owner_login(login)
    return [blog_to_response(db_blog) for db_blog in db_blogs]


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    description="Retrieve one of the caller's blogs by its id.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "name": "Travel notes",
                        "handle": "travel",
                        "user": {"id": 1, "login": "johndoe"},
                    },
                },
            },
        },
        403: FORBIDDEN_RESPONSE,
        404: NOT_FOUND_RESPONSE,
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_get_by_id",
)
@limiter.limit("60/minute")
async def get_blog(
    request: Request,
    blog_id: BlogIdPath,
    repo: BlogRepoDep,
    login: CurrentLoginDep,
) -> BlogResponse:
    """
    Get blog by ID.

    Parameters
    ----------
    request : Request
        Current request context.
    blog_id : int
        Blog identifier.
    repo : BlogRepository
        Repository dependency.
    login : str | None
        Caller's login, if authenticated.

    Returns
    -------
    BlogResponse
        Blog data.

    Raises
    ------
    RecordNotFoundError
        If blog not found.
    ForbiddenError
        If the caller does not own the blog.
    """
    logger.debug(f"REST request to get Blog : {blog_id}")
    db_blog = await repo.get_or_raise(blog_id)
    check_blog_owner(db_blog, login)
    return blog_to_response(db_blog)


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete one of the caller's blogs by its id.",
    responses={
        204: {"description": "No Content"},
        403: FORBIDDEN_RESPONSE,
        404: NOT_FOUND_RESPONSE,
        429: RATE_LIMIT_RESPONSE,
    },
    operation_id="blogs_delete",
)
@limiter.limit("10/minute")
async def delete_blog(
    request: Request,
    response: Response,
    blog_id: BlogIdPath,
    repo: BlogRepoDep,
    login: CurrentLoginDep,
) -> None:
    """
    Delete blog by ID.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object carrying the alert headers.
    blog_id : int
        Blog identifier.
    repo : BlogRepository
        Repository dependency.
    login : str | None
        Caller's login, if authenticated.

    Raises
    ------
    RecordNotFoundError
        If blog not found.
    ForbiddenError
        If the caller does not own the blog.
    """
    logger.debug(f"REST request to delete Blog : {blog_id}")
    db_blog = await repo.get_or_raise(blog_id)
    check_blog_owner(db_blog, login)
    await repo.delete_by_id(blog_id)

    response.headers.update(
        create_entity_deletion_alert(
            settings.CLIENT_APP_NAME,
            settings.ENABLE_TRANSLATION,
            ENTITY_NAME,
            str(blog_id),
        ),
    )
