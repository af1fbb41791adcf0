"""Structured logging configuration for schemadiff.

This module configures structlog for consistent, machine-readable logging
across the analyzer, the loader and the command-line interface.
"""

import logging
import sys
import time
from typing import Any

import structlog
from structlog.typing import EventDict


def add_app_context(
    _logger: Any, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add application-specific context to log events."""
    event_dict["service"] = "schemadiff"
    event_dict["component"] = event_dict.get("logger", "unknown")
    return event_dict


def configure_logging(
    environment: str = "development", log_level: str = "INFO", json_logs: bool = False
) -> None:
    """Configure structured logging for the application.

    Args:
        environment: Application environment (development/testing/production)
        log_level: Logging level (DEBUG/INFO/WARNING/ERROR)
        json_logs: Whether to output JSON format logs
    """
    # Log to stderr so that report output on stdout stays machine-readable
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
    )

    if json_logs or environment == "production":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables shared by every following log event.

    Args:
        **kwargs: Context variables to bind (e.g., analysis_id, script)
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


class AnalysisPassLogger:
    """Helper for logging the duration and outcome of one analysis pass."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, analysis_pass: str):
        self.logger = logger
        self.analysis_pass = analysis_pass
        self.start_time: float | None = None

    def __enter__(self) -> "AnalysisPassLogger":
        self.start_time = time.perf_counter()
        self.logger.debug("Analysis pass started", analysis_pass=self.analysis_pass)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.start_time is None:
            return

        duration = time.perf_counter() - self.start_time
        if exc_type is None:
            self.logger.debug(
                "Analysis pass completed",
                analysis_pass=self.analysis_pass,
                duration_ms=round(duration * 1000, 2),
            )
        else:
            self.logger.debug(
                "Analysis pass aborted",
                analysis_pass=self.analysis_pass,
                duration_ms=round(duration * 1000, 2),
                error=str(exc_val),
                error_type=exc_type.__name__,
            )

    def log_skip(self, reason: str, **kwargs: Any) -> None:
        """Log an edit operation that produced no difference detail."""
        self.logger.debug(
            "Edit operation skipped",
            analysis_pass=self.analysis_pass,
            reason=reason,
            **kwargs,
        )
