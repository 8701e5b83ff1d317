# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    BlogOpsDeps,
    BlogRepoDep,
    CurrentLoginDep,
    RequiredLoginDep,
    UserRepoDep,
    get_blog_repository,
    get_current_login,
    get_required_login,
    get_user_repository,
)

__all__ = [
    "BlogOpsDeps",
    "BlogRepoDep",
    "CurrentLoginDep",
    "RequiredLoginDep",
    "UserRepoDep",
    "get_blog_repository",
    "get_current_login",
    "get_required_login",
    "get_user_repository",
]
