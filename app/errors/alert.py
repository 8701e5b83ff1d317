"""Client-facing errors for entity endpoints."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_403_FORBIDDEN

from app.configs import FORBIDDEN_CODE, file_logger, settings
from app.errors.base import BaseAppError, create_exception_handler
from app.utils.header_util import create_failure_alert
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))


class BadRequestAlertError(BaseAppError):
    """
    Raised when a request is well formed but semantically invalid.

    Carries the entity name and a machine-readable reason code (for example
    `idexists` or `idnull`) which are echoed in the body and in the failure
    alert headers.
    """

    def __init__(self, detail: str, entity_name: str, error_key: str) -> None:
        super().__init__(
            detail,
            HTTP_400_BAD_REQUEST,
            headers=create_failure_alert(
                settings.CLIENT_APP_NAME,
                settings.ENABLE_TRANSLATION,
                entity_name,
                error_key,
                detail,
            ),
        )
        self.entity_name = entity_name
        self.error_key = error_key


class ForbiddenError(BaseAppError):
    """Raised when the caller does not own the resource it is acting on."""

    def __init__(self, detail: str = FORBIDDEN_CODE) -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


async def bad_request_alert_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Render a `BadRequestAlertError` as a problem document.

    Args:
        request: The incoming request.
        exc: The BadRequestAlertError exception.

    Returns:
        ORJSONResponse with the reason code and failure alert headers.
    """
    alert = cast(BadRequestAlertError, exc)

    logger.warning(
        f"{alert.detail} ({alert.error_key}) for ip: {host(request)} "
        f"for endpoint {request.url.path}",
    )

    return ORJSONResponse(
        status_code=alert.status_code,
        content={
            "detail": alert.detail,
            "entityName": alert.entity_name,
            "errorKey": alert.error_key,
            "message": f"error.{alert.error_key}",
            "params": alert.entity_name,
        },
        headers=alert.headers,
    )


forbidden_exception_handler = create_exception_handler(logger)
