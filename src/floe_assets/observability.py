"""Structured logging and OpenTelemetry spans for floe-assets.

This module provides:
- Structured logging setup via structlog
- OpenTelemetry span helpers for asset factory operations
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog
from opentelemetry import trace
from opentelemetry.trace import SpanKind, Status, StatusCode

if TYPE_CHECKING:
    from opentelemetry.trace import Span, Tracer
    from structlog.stdlib import BoundLogger

# Module-level logger and tracer
_logger: BoundLogger | None = None
_tracer: Tracer | None = None

TRACER_NAME = "floe.assets"


def get_logger() -> BoundLogger:
    """Get the module logger, creating it if necessary.

    Returns:
        Configured structlog BoundLogger instance.

    Example:
        >>> logger = get_logger()
        >>> logger.info("asset_created", name="a1b2c3d")
    """
    global _logger
    if _logger is None:
        _logger = structlog.get_logger(TRACER_NAME)
    assert _logger is not None  # Type narrowing for mypy
    return _logger


def get_tracer() -> Tracer:
    """Get the OpenTelemetry tracer for floe-assets.

    Returns:
        OpenTelemetry Tracer instance.
    """
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(TRACER_NAME)
    return _tracer


def configure_logging(
    *,
    log_level: str = "INFO",
    json_format: bool = True,
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for floe-assets.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output JSON format. If False, output human-readable.
        add_timestamp: If True, add ISO timestamp to log entries.

    Example:
        >>> configure_logging(log_level="DEBUG", json_format=False)
    """
    import logging

    processors: list[Any] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
    )


@contextmanager
def asset_operation(
    operation: str,
    *,
    attributes: dict[str, Any] | None = None,
) -> Iterator[Span]:
    """Create a span for an asset factory operation.

    Logs ``<operation>_started`` on entry, ``<operation>_completed`` on
    success and ``<operation>_failed`` before re-raising any exception.

    Args:
        operation: Operation name (e.g., "create_asset").
        attributes: Optional span attributes, also used as log fields.

    Yields:
        OpenTelemetry Span instance.

    Example:
        >>> with asset_operation("create_asset", attributes={"asset.name": "a1b2c3d"}):
        ...     build()
    """
    tracer = get_tracer()
    logger = get_logger()
    attrs = attributes or {}
    log_fields = {key.replace(".", "_"): value for key, value in attrs.items()}

    with tracer.start_as_current_span(
        f"assets.{operation}", kind=SpanKind.INTERNAL, attributes=attrs
    ) as s:
        logger.debug(f"{operation}_started", **log_fields)
        try:
            yield s
            s.set_status(Status(StatusCode.OK))
            logger.info(f"{operation}_completed", **log_fields)
        except Exception as exc:
            s.set_status(Status(StatusCode.ERROR, str(exc)))
            s.record_exception(exc)
            logger.error(f"{operation}_failed", error=str(exc), **log_fields)
            raise
