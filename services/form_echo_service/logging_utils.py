"""
Structured logging for the Form Echo Service, built on structlog.

Every record carries the service identity from Settings and, while a request
is being handled, the request's method and path (bound through contextvars).
Records go to stdout through a stdlib handler, alongside Hypercorn's access log.

Output format:
- console renderer (coloured) for local development and tests
- JSON renderer when LOG_FORMAT=json or the environment is production
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from quart import Quart, request
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.typing import EventDict, Processor, WrappedLogger

from services.form_echo_service.config import Settings


def service_context_processor(service_name: str, environment: str) -> Processor:
    """Build a processor stamping service.name and deployment.environment on records."""

    def add_service_context(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict["service.name"] = service_name
        event_dict["deployment.environment"] = environment
        return event_dict

    return add_service_context


def _use_json_output(settings: Settings) -> bool:
    log_format = os.getenv("LOG_FORMAT", "").lower()
    if log_format:
        return log_format == "json"
    return settings.is_production()


def configure_service_logging(settings: Settings) -> None:
    """
    Configure structlog and stdlib logging from the service settings.

    Environment Variables:
        LOG_FORMAT: "json" or "console"; unset means JSON only in production
    """
    processors: list[Processor] = [
        merge_contextvars,
        service_context_processor(settings.SERVICE_NAME, settings.ENVIRONMENT),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]
    if _use_json_output(settings):
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors += [structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer(colors=True)]

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        force=True,  # Force reconfiguration if already configured
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_service_logger(name: str | None = None) -> Any:
    """Return a structlog logger, bound with logger_name when a name is given."""
    logger = structlog.get_logger()

    if name:
        logger = logger.bind(logger_name=name)

    return logger


async def bind_request_context() -> None:
    """Replace the log context with the current request's method and path."""
    clear_contextvars()
    bind_contextvars(http_method=request.method, http_path=request.path)


def setup_request_log_context(app: Quart) -> None:
    app.before_request(bind_request_context)
