"""Authentication errors."""

from logging import getLogger

from starlette.status import HTTP_401_UNAUTHORIZED

from app.configs import file_logger
from app.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class UserAuthenticationError(BaseAppError):
    """Raised when an operation needs a caller identity and none was presented."""

    def __init__(
        self,
        detail: str = "Authentication required",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code, headers={"WWW-Authenticate": "Bearer"})


auth_exception_handler = create_exception_handler(logger)
