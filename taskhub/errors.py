"""
TaskHub error hierarchy and the HTTP error body shared by every endpoint.

Hierarchy:
    TaskHubError
    ├── ResourceNotFoundError  : missing task or user (404)
    │   └── AccessDeniedError  : not visible to the caller (also 404)
    ├── ValidationFailure      : bad or missing input (400)
    ├── AuthenticationError    : bearer token rejected (401)
    └── ConfigurationError     : server misconfiguration (500)
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ErrorDetails(BaseModel):
    """Error payload returned by the API"""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    message: str
    details: str


class TaskHubError(Exception):
    """Base error for all TaskHub failures"""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"


class ResourceNotFoundError(TaskHubError):
    """Requested resource does not exist"""

    status_code = 404

    def __init__(
        self,
        message: Optional[str] = None,
        resource_name: Optional[str] = None,
        field_name: Optional[str] = None,
        field_value: Any = None,
    ):
        if message is None:
            message = f"{resource_name} not found with {field_name}: '{field_value}'"
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(message)


class AccessDeniedError(ResourceNotFoundError):
    """
    The caller may not see or change the resource.

    Reported exactly like a missing resource so that callers cannot probe
    for tasks they have no access to.
    """


class ValidationFailure(TaskHubError):
    """Input failed validation"""

    status_code = 400


class AuthenticationError(TaskHubError):
    """Bearer token missing, malformed, expired or forged"""

    status_code = 401


class ConfigurationError(TaskHubError):
    """Server is not configured correctly"""

    status_code = 500


def _error_response(status_code: int, message: str, request: Request) -> JSONResponse:
    body = ErrorDetails(message=message, details=f"uri={request.url.path}")
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def handle_taskhub_error(request: Request, exc: TaskHubError) -> JSONResponse:
    if isinstance(exc, AuthenticationError):
        logger.error(f"Authentication error: {exc.message}")
        return _error_response(exc.status_code, f"Unauthorized: {exc.message}", request)
    if exc.status_code >= 500:
        logger.error(f"{exc!r} on {request.url.path}")
    else:
        logger.info(f"{exc!r} on {request.url.path}")
    return _error_response(exc.status_code, exc.message, request)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return _error_response(400, "; ".join(messages) or "Invalid request", request)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that turn errors into ErrorDetails responses"""
    app.add_exception_handler(TaskHubError, handle_taskhub_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
