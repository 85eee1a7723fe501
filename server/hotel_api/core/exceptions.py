"""Application errors and their HTTP exception handlers.

Domain errors raised by the service layer (``NotFoundError`` and
``PaymentRequiredError``) keep the wire format the hotel clients already
consume: a 404 carries its message as a plain-text body and a 402 has no
body at all. Authentication and unexpected failures are rendered as
RFC 9457 Problem Details.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class ApplicationError(Exception):
    """Base class for errors raised by the business rules."""

    name = "ApplicationError"
    default_message = "Application error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when an enrollment, ticket or hotel does not exist."""

    name = "NotFoundError"
    default_message = "No result for this search!"


class PaymentRequiredError(ApplicationError):
    """Raised when the ticket is unpaid or does not include accommodation."""

    name = "PaymentRequiredError"
    default_message = "You must pay for a ticket that includes hotel accommodation"


class ProblemDetailsException(HTTPException):
    """
    Base exception class following RFC 9457 Problem Details for HTTP APIs.

    https://tools.ietf.org/rfc/rfc9457.txt
    """

    def __init__(
        self,
        status_code: int,
        title: str,
        detail: Optional[str] = None,
        type_uri: Optional[str] = None,
        instance: Optional[str] = None,
        extensions: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.title = title
        self.type_uri = type_uri or f"about:blank#{status_code}"
        self.problem_details: Dict[str, Any] = {
            "type": self.type_uri,
            "title": title,
            "status": status_code,
        }
        if detail:
            self.problem_details["detail"] = detail
        if instance:
            self.problem_details["instance"] = instance
        self.problem_details.update(extensions or {})

        super().__init__(status_code=status_code, detail=detail, headers=headers)


class AuthenticationError(ProblemDetailsException):
    """Exception for missing or invalid bearer credentials."""

    def __init__(
        self,
        detail: str = "Authentication credentials are required",
        instance: Optional[str] = None,
    ):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            title="Authentication Required",
            detail=detail,
            type_uri="about:blank#authentication-required",
            instance=instance,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
    """Render a NotFoundError as a plain-text 404."""
    return PlainTextResponse(exc.message, status_code=status.HTTP_404_NOT_FOUND)


async def payment_required_handler(request: Request, exc: PaymentRequiredError) -> Response:
    """Render a PaymentRequiredError as an empty 402."""
    return Response(status_code=status.HTTP_402_PAYMENT_REQUIRED)


async def problem_details_handler(request: Request, exc: ProblemDetailsException) -> JSONResponse:
    """
    Exception handler for Problem Details exceptions.

    Args:
        request: FastAPI request object
        exc: Problem Details exception

    Returns:
        JSONResponse: Problem Details formatted response
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.problem_details,
        headers=exc.headers,
        media_type="application/problem+json",
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Convert unhandled exceptions to a Problem Details 500.

    The error id is logged alongside the traceback so the response can be
    correlated with the server logs.
    """
    error_id = str(uuid.uuid4())
    logger.error(
        "Unhandled exception",
        extra={"error_id": error_id, "path": request.url.path},
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "type": "about:blank#internal-server-error",
            "title": "Internal Server Error",
            "status": 500,
            "detail": "An unexpected error occurred while processing the request",
            "instance": str(request.url),
            "error_id": error_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        media_type="application/problem+json",
    )
