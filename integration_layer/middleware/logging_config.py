"""
Structured Logging Configuration

Uses structlog for JSON-formatted logs with correlation IDs.

Features:
- Request correlation IDs (track a request across services)
- JSON output in production, console output for local development
- Automatic context injection (method, path, client)
- Request duration tracking
"""

import logging
import structlog
import uuid
from fastapi import Request
import time

CORRELATION_ID_HEADER = "X-Correlation-ID"

# ==================== Configuration ====================

def configure_logging(log_level: str = "INFO", json_logs: bool = True):
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON format. If False, use console format.
    """

    if json_logs:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer()
        ]
    else:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=True),
            structlog.dev.ConsoleRenderer()
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Standard library logging for uvicorn and other third-party libs
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
        force=True,
    )


# ==================== Correlation ID Middleware ====================

async def correlation_id_middleware(request: Request, call_next):
    """
    Middleware to add correlation IDs to all requests.

    Reuses an incoming X-Correlation-ID / X-Request-ID header or generates
    a UUID4, binds it into the structlog context for the duration of the
    request, and echoes it on the response.
    """
    correlation_id = (
        request.headers.get(CORRELATION_ID_HEADER)
        or request.headers.get("X-Request-ID")
        or str(uuid.uuid4())
    )
    request.state.correlation_id = correlation_id

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        correlation_id=correlation_id,
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else "unknown"
    )

    logger = structlog.get_logger()

    start_time = time.time()
    logger.info(
        "request_started",
        query_params=dict(request.query_params) if request.query_params else None,
        user_agent=request.headers.get("user-agent", "unknown")
    )

    try:
        response = await call_next(request)

        duration = time.time() - start_time
        response.headers[CORRELATION_ID_HEADER] = correlation_id

        logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_seconds=round(duration, 3)
        )

        return response

    except Exception as e:
        duration = time.time() - start_time

        logger.error(
            "request_failed",
            error=str(e),
            error_type=type(e).__name__,
            duration_seconds=round(duration, 3),
            exc_info=True
        )

        raise

    finally:
        structlog.contextvars.clear_contextvars()


# ==================== Helper Functions ====================

def get_logger(name: str = None):
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("insights_generated", user_id="user_001", insight_count=2)
    """
    return structlog.get_logger(name)


def log_business_event(event_type: str, **details):
    """
    Log a business-relevant event.

    Usage:
        log_business_event("vip_user_viewed", user_id="user_001", value_score=90.0)
    """
    logger = structlog.get_logger()
    logger.info("business_event", event_type=event_type, **details)
