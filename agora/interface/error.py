"""Interface layer errors.

Translates domain errors raised by use cases into HTTP errors.
"""

import logfire
from fastapi import HTTPException, status

from agora.domain.error import (
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP error returned to the client.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException with the matching status code
    """
    if isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, AuthorizationError):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logfire.warn(
        "Request failed",
        error=str(error),
        error_type=type(error).__name__,
        status_code=status_code,
    )
    return HTTPException(status_code=status_code, detail=str(error))
