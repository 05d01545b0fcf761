"""Structured logging configuration for screengraph using structlog."""

import logging
import sys
from pathlib import Path
from typing import Any, cast

import structlog

from ..config import get_settings


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    structured: bool = True,
    console: bool = True,
    add_timestamp: bool = True,
    add_caller_info: bool = True,
    colorize: bool = True,
) -> None:
    """Configure structured logging for screengraph.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        structured: Use JSON structured output
        console: Enable console output
        add_timestamp: Add timestamps to logs
        add_caller_info: Add caller information
        colorize: Colorize console output (only for non-structured)
    """
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if add_caller_info:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]
    )

    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colorize and console))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    root = logging.getLogger("screengraph")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper()))
    root.propagate = False


_logging_initialized = False


def _ensure_logging_initialized() -> None:
    """Ensure logging is initialized (called lazily, not at import time)."""
    global _logging_initialized

    if _logging_initialized:
        return

    settings = get_settings()
    setup_logging(
        level="DEBUG" if settings.debug_mode else settings.log_level,
        log_file=settings.log_file,
        structured=settings.structured_logging,
        colorize=settings.debug_mode,
    )
    _logging_initialized = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    _ensure_logging_initialized()
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


class NavigationLogger:
    """Specialized logger for routing and transition events."""

    def __init__(self, base_logger: structlog.stdlib.BoundLogger | None = None) -> None:
        """Initialize navigation logger.

        Args:
            base_logger: Base logger to use
        """
        self.logger = base_logger or get_logger(__name__)

    def log_route(self, from_scene: str, to_scene: str, path: list[str]) -> None:
        """Log a planned route.

        Args:
            from_scene: Scene the navigator is at
            to_scene: Requested target
            path: Scene names along the route, source included
        """
        self.logger.debug(
            "route_planned",
            from_scene=from_scene,
            to_scene=to_scene,
            hops=max(len(path) - 1, 0),
            path=path,
        )

    def log_transition(self, from_scene: str, to_scene: str, back: bool = False) -> None:
        """Log an executed transition.

        Args:
            from_scene: Source scene
            to_scene: Destination scene
            back: Whether the transition was a transient back-transition
        """
        self.logger.info("transition_executed", from_scene=from_scene, to_scene=to_scene, back=back)

    def log_back_edge(self, scene: str, return_scene: str, bound: bool) -> None:
        """Log creation or consumption of a back-transition."""
        event = "back_edge_bound" if bound else "back_edge_consumed"
        self.logger.debug(event, scene=scene, return_scene=return_scene)

    def log_failure(self, error: Exception, **kwargs) -> None:
        """Log a navigation failure.

        Args:
            error: The failure being reported
            **kwargs: Additional context
        """
        self.logger.warning(
            "navigation_failed",
            error=str(error),
            error_type=type(error).__name__,
            **kwargs,
        )
