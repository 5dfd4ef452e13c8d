import logging
import os
import sys

import structlog
from opentelemetry.instrumentation.logging import LoggingInstrumentor


def get_log_level():
    """Get log level from environment or default to INFO"""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_renderer():
    """Get log renderer based on environment"""
    env = os.getenv("ENVIRONMENT", "development")
    # Use JSON format for tests and production
    if env in ["test", "production"]:
        return structlog.processors.JSONRenderer()
    # Pretty printing for local development
    return structlog.dev.ConsoleRenderer(colors=True, sort_keys=False)


def configure_logging(instrument: bool = True):
    """Set up structlog + OTEL context injection.

    Meant to be called once by the application embedding the client; the
    client itself only emits events through ``structlog.get_logger``.
    """
    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            get_log_renderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    env = os.getenv("ENVIRONMENT", "development")
    if env == "test":
        # In test mode, write to stdout for easier capture
        handler = logging.StreamHandler(sys.stdout)
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(get_log_level())

    # httpx logs every request at INFO; ours already carry the same information
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if instrument:
        LoggingInstrumentor().instrument(set_logging_format=False)


class ClientEvents:
    """Standard names for client event logs"""

    TOKEN_REQUEST = "paypal.token.request"
    TOKEN_REFRESHED = "paypal.token.refreshed"
    TOKEN_FAILURE = "paypal.token.failure"
    REQUEST = "paypal.request"
    RESPONSE = "paypal.response"
    REQUEST_FAILURE = "paypal.request.failure"
