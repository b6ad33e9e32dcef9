"""
Standardized Error Handling

Provides:
- API exception classes with HTTP status codes
- Error responses in the same envelope as successful ones
- Correlation ID tracking in errors
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog
from typing import Any, Dict, Optional, Tuple

logger = structlog.get_logger(__name__)

# ==================== Custom Exceptions ====================

class APIError(Exception):
    """Base class for API errors."""
    def __init__(
        self,
        message: str,
        error_code: str = None,
        status_code: int = 500,
        details: Dict[str, Any] = None
    ):
        self.message = message
        self.error_code = error_code or "INTERNAL_ERROR"
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(APIError):
    """Resource not found (404)."""
    def __init__(self, resource: str, identifier: str = None, **kwargs):
        message = f"{resource} not found"
        if identifier:
            message += f": {identifier}"

        details = {"resource": resource}
        if identifier:
            details["identifier"] = identifier
        details.update(kwargs)

        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=404,
            details=details
        )


# ==================== Error Response Format ====================

def error_envelope(error: str, correlation_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Failure envelope.

    Format:
    {
        "success": false,
        "error": "User not found: user_999",
        "message": "Reference: <correlation id>"
    }
    """
    response = {"success": False, "error": error}
    if correlation_id:
        response["message"] = f"Reference: {correlation_id}"
    return response


def create_error_response(
    error: Exception,
    correlation_id: str = None
) -> Tuple[Dict[str, Any], int]:
    """Map an exception to (envelope, status code)."""
    if isinstance(error, APIError):
        message = error.message
        status_code = error.status_code
    elif isinstance(error, StarletteHTTPException):
        message = str(error.detail)
        status_code = error.status_code
    else:
        # Internal details are not exposed to clients
        message = "An unexpected error occurred. Please try again later."
        status_code = 500

    return error_envelope(message, correlation_id), status_code


def _correlation_id(request: Request) -> Optional[str]:
    correlation_id = getattr(request.state, "correlation_id", None)
    if not correlation_id:
        context = structlog.contextvars.get_contextvars()
        correlation_id = context.get("correlation_id")
    return correlation_id


# ==================== Exception Handlers ====================

async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle custom API errors."""
    logger.warning(
        "api_error",
        error_code=exc.error_code,
        error_message=exc.message,
        status_code=exc.status_code,
        details=exc.details
    )

    response_data, status_code = create_error_response(exc, correlation_id=_correlation_id(request))

    return JSONResponse(status_code=status_code, content=response_data)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle standard HTTP exceptions (unknown routes, wrong methods)."""
    logger.warning(
        "http_exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path
    )

    response_data, status_code = create_error_response(exc, correlation_id=_correlation_id(request))

    return JSONResponse(
        status_code=status_code,
        content=response_data,
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors (422)."""
    validation_errors = []
    for error in exc.errors():
        validation_errors.append({
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"]
        })

    logger.warning(
        "validation_error",
        path=request.url.path,
        errors=validation_errors
    )

    response_data = error_envelope("Request validation failed", _correlation_id(request))
    response_data["data"] = {"validation_errors": validation_errors}

    return JSONResponse(status_code=422, content=response_data)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions (500)."""
    logger.error(
        "unexpected_error",
        error_type=type(exc).__name__,
        error_message=str(exc),
        path=request.url.path,
        exc_info=True
    )

    response_data, status_code = create_error_response(exc, correlation_id=_correlation_id(request))

    return JSONResponse(status_code=status_code, content=response_data)


def register_exception_handlers(app) -> None:
    """Attach every handler above to a FastAPI app."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
