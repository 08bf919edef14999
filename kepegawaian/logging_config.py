"""Structured logging configuration.

Outputs either JSON (for production log shipping) or console format (for development).
Every line carries the service name; request lines also carry the correlation id,
method and path bound by the request middleware, and the resource bound by the
resource routers.

Usage:
    from kepegawaian.logging_config import get_logger, setup_logging

    setup_logging(service_name="kepegawaian")
    logger = get_logger(__name__)
    logger.info("event_name", key1=value1, key2=value2)
"""

import logging
import os
import sys
from typing import Literal

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

REQUEST_CONTEXT_KEYS = ("correlation_id", "method", "path", "resource")


def add_service_name(service_name: str) -> Processor:
    """Build a processor that stamps ``service`` on every event.

    A processor rather than a context variable, since the lifespan that
    configures logging runs in a different task from the requests.
    """

    def processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def bind_request_context(**values: str) -> None:
    """Bind request-scoped keys, such as the resource being served."""
    structlog.contextvars.bind_contextvars(**values)


def clear_request_context() -> None:
    structlog.contextvars.unbind_contextvars(*REQUEST_CONTEXT_KEYS)


def setup_logging(
    service_name: str | None = None,
    log_format: Literal["json", "console"] | None = None,
    log_level: str | None = None,
) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        service_name: Stamped on every log line.
                     Falls back to SERVICE_NAME env var or "kepegawaian".
        log_format: "json" for production, "console" for dev.
                   Falls back to LOG_FORMAT env var or "console".
        log_level: DEBUG, INFO, WARNING or ERROR.
                  Falls back to LOG_LEVEL env var or "INFO".
    """
    service_name = service_name or os.getenv("SERVICE_NAME", "kepegawaian")
    log_format = log_format or os.getenv("LOG_FORMAT", "console")
    log_level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level, logging.INFO),
        force=True,
    )

    # Requests are logged by the correlation middleware
    logging.getLogger("uvicorn.access").disabled = True

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_service_name(service_name),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=False),
        structlog.processors.CallsiteParameterAdder(
            {
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            }
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(sort_keys=False))
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    get_logger(__name__).info("logging_initialized", log_format=log_format, log_level=log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, named after the caller's module when ``name`` is given."""
    return structlog.get_logger(name)
