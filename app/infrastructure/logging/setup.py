"""Structlog configuration.

Configures structlog over the standard library so that every module can
use ``structlog.get_logger()`` and emit snake_case events with key/value
context. Output is a console renderer in development and JSON lines in
production, where CloudWatch or another collector picks it up.

Usage:
    from infrastructure.logging import configure_logging

    # Once, at process start
    configure_logging()

    logger = structlog.get_logger()
    logger.info("poll_started", guild_id=117311)
"""

import logging
import sys
from typing import TYPE_CHECKING, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "guild-poller"


def _is_test_environment() -> bool:
    """True when pytest is in sys.modules."""
    return "pytest" in sys.modules


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        settings: Settings instance; loaded through the services provider
            when omitted.
        log_level: Optional override for settings.LOG_LEVEL.
        is_production: Optional override for settings.is_production. Controls
            JSON vs console output.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_app_info(APP_NAME),
        mask_sensitive_data(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
        force=True,
    )
    # boto3 and urllib3 are chatty at INFO
    for noisy in ("botocore", "boto3", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return structlog.stdlib.get_logger()


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger, bound to ``logger_name`` when a name is given."""
    logger = structlog.stdlib.get_logger()
    if name:
        return logger.bind(logger_name=name)
    return logger
