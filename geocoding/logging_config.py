"""Structured logging for the geocoding client.

The client only emits events through ``logger``. Applications that want the
JSON output call ``configure_logging`` once at startup.
"""

import logging

import structlog

logger = structlog.get_logger("geocoding")


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog to render JSON events at or above ``level``.

    Args:
        level: Standard logging level name, e.g. ``"DEBUG"``.

    Raises:
        ValueError: If ``level`` is not a known logging level.
    """
    level_no = logging.getLevelName(level.upper())
    if not isinstance(level_no, int):
        raise ValueError(f"Unknown log level: {level}")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        cache_logger_on_first_use=True,
    )
