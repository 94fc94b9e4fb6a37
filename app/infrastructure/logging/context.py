"""Run context binding for structured logging.

Binds a run identifier to every log entry emitted during one program run,
so the entries of a run (and of the commands it launches) can be grouped.

Usage:
    from infrastructure.logging import bind_run_context

    with bind_run_context(command="run"):
        logger.info("launching")

Dependencies:
    - structlog.contextvars
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
    """Bind run-scoped context to all logs within the context manager.

    Args:
        run_id: Unique run identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The bound run id.
    """
    context: dict[str, Any] = {"run_id": run_id or str(uuid.uuid4())}
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["run_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())

