"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the process
    - get_logger(): Get a logger instance, optionally bound to a name
    - bind_run_context(): Context manager binding a run id to every log line
    - get_run_id(): Current run id
    - clear_run_context(): Clear all bound context

Example:
    from infrastructure.logging import configure_logging, bind_run_context

    configure_logging()

    with bind_run_context(guild_id=117311):
        logger.info("poll_started")
"""

from infrastructure.logging.context import (
    bind_run_context,
    clear_run_context,
    get_run_id,
)
from infrastructure.logging.formatters import (
    SENSITIVE_PATTERNS,
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
)
from infrastructure.logging.setup import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_run_context",
    "get_run_id",
    "clear_run_context",
    "add_app_info",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
