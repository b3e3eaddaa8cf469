"""Structured logging for effort scoring.

Library modules log through ``logging.getLogger(__name__)``; this module routes
those records through structlog. TemplateRenderer opens a correlation_context
with the run id for every render, so lines logged while scoring a report carry
the analysis run as correlation_id, plus any bound context (template name).

Example usage:
    from effort.core.logging import configure_logging, correlation_context

    configure_logging(level="DEBUG")

    with correlation_context("batch-7"):
        aggregator.compute(file)  # log lines include correlation_id="batch-7"
"""

import logging
import socket
import sys
import uuid
from contextvars import ContextVar
from functools import lru_cache
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

EFFORT_VERSION = "0.3.0"

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

_bound_context: ContextVar[dict[str, Any]] = ContextVar("bound_context", default={})

_module_log_levels: dict[str, int] = {}

_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "exception": logging.ERROR,
}


def generate_correlation_id() -> str:
    """Generate a unique correlation ID for an analysis run.

    Returns:
        A unique string identifier (UUID4 format).
    """
    return str(uuid.uuid4())


def get_correlation_id() -> str | None:
    """Get the current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation ID in the current context."""
    _correlation_id.set(correlation_id)


class correlation_context:
    """Context manager establishing a correlation ID scope.

    Example:
        with correlation_context("run-123"):
            logger.info("rendering")  # Includes correlation_id="run-123"
    """

    def __init__(self, correlation_id: str | None = None) -> None:
        self.correlation_id = correlation_id or generate_correlation_id()
        self._token: Any = None

    def __enter__(self) -> str:
        self._token = _correlation_id.set(self.correlation_id)
        return self.correlation_id

    def __exit__(self, *args: Any) -> None:
        _correlation_id.reset(self._token)


class bind_context:
    """Context manager to bind additional fields to every log line.

    Example:
        with bind_context(template="migration_issues.html"):
            logger.info("render_started")
    """

    def __init__(self, **kwargs: Any) -> None:
        self.ctx = kwargs
        self._token: Any = None

    def __enter__(self) -> "bind_context":
        new_context = {**_bound_context.get(), **self.ctx}
        self._token = _bound_context.set(new_context)
        return self

    def __exit__(self, *args: Any) -> None:
        _bound_context.reset(self._token)


# =============================================================================
# Structlog Processors
# =============================================================================


def add_correlation_id(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add correlation ID to log events if available."""
    correlation_id = get_correlation_id()
    if correlation_id is not None:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def add_bound_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add bound context variables to log events."""
    for key, value in _bound_context.get().items():
        event_dict.setdefault(key, value)
    return event_dict


@lru_cache(maxsize=1)
def _get_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return "unknown"


def add_common_fields(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add package version and hostname."""
    event_dict.setdefault("effort_version", EFFORT_VERSION)
    event_dict.setdefault("hostname", _get_hostname())
    return event_dict


def filter_by_module_level(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Drop events below the most specific module-level threshold."""
    if not _module_log_levels:
        return event_dict

    logger_name = event_dict.get("logger", "")
    if not logger_name:
        return event_dict

    level_threshold = None
    matched_prefix = ""
    for module, level in _module_log_levels.items():
        if logger_name == module or logger_name.startswith(f"{module}."):
            if len(module) > len(matched_prefix):
                level_threshold = level
                matched_prefix = module

    if level_threshold is not None:
        current_level = _LEVEL_MAP.get(method_name.lower(), logging.INFO)
        if current_level < level_threshold:
            raise structlog.DropEvent

    return event_dict


# =============================================================================
# Logging Configuration
# =============================================================================


def set_module_log_level(module: str, level: int | str) -> None:
    """Set the log level for a specific module.

    Args:
        module: Module name (e.g., "effort.scoring").
        level: Log level name or numeric level.
    """
    if isinstance(level, str):
        numeric_level: int = getattr(logging, level.upper(), logging.INFO)
    else:
        numeric_level = level
    _module_log_levels[module] = numeric_level


def get_module_log_level(module: str) -> int | None:
    """Get the log level override for a module, if any."""
    return _module_log_levels.get(module)


def clear_module_log_levels() -> None:
    """Clear all module-specific log level overrides."""
    _module_log_levels.clear()


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        add_correlation_id,
        add_bound_context,
        add_common_fields,
        filter_by_module_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    level: str | int = logging.INFO,
    json_output: bool | None = None,
    log_file: str | None = None,
    module_levels: dict[str, str | int] | None = None,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Global log level.
        json_output: Use JSON output. If None, JSON is used when stdout is
            not a TTY.
        log_file: Optional file path for log output.
        module_levels: Per-module log level overrides.
    """
    if json_output is None:
        json_output = not sys.stdout.isatty()

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if module_levels:
        for module, mod_level in module_levels.items():
            set_module_log_level(module, mod_level)

    shared_processors = _shared_processors()

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def configure_logging_from_settings() -> None:
    """Configure logging from the cached EffortSettings."""
    from effort.core.settings import get_cached_settings

    settings = get_cached_settings()
    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        log_file=settings.logging.file,
        module_levels=dict(settings.logging.module_levels),
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def reset_logging() -> None:
    """Reset logging configuration to defaults.

    Used by tests to get a clean state between cases.
    """
    clear_module_log_levels()
    _correlation_id.set(None)
    _bound_context.set({})

    structlog.reset_defaults()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
