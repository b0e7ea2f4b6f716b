"""Run context binding for structured logging.

Every log line emitted during one poller run carries the same ``run_id``
so a single trigger can be followed through fetch, dispatch and watermark
write.

Usage:
    from infrastructure.logging import bind_run_context

    with bind_run_context(guild_id=117311):
        service.run()
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_run_context(
    run_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind run-scoped context to all logs within the block.

    Args:
        run_id: Unique run identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs (guild_id, trigger, ...).

    Yields:
        The run id in effect for the block.
    """
    context: dict[str, Any] = {"run_id": run_id or str(uuid.uuid4())}
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["run_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_run_id() -> Optional[str]:
    """Return the run id bound in the current context, if any."""
    return structlog.contextvars.get_contextvars().get("run_id")


def clear_run_context() -> None:
    """Clear all bound context (used between scheduler iterations)."""
    structlog.contextvars.clear_contextvars()
