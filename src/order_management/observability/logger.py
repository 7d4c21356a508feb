"""Structured logging for the order service.

Modules log through the standard ``logging.getLogger(__name__)``.
``setup_logging`` installs a root handler whose formatter runs every
stdlib record through structlog processors, rendering JSON in production
and a console layout in development.

Each application use case runs inside ``use_case_context``, which stamps
a fresh trace_id plus the use case name and order id onto every log line
written while it runs.
"""

from __future__ import annotations

import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator

import structlog

from order_management.core.config import ObservabilityConfig

_trace_id: ContextVar[str] = ContextVar("trace_id", default="")


def get_trace_id() -> str:
    """Get current trace ID, creating one on first use."""
    tid = _trace_id.get()
    if not tid:
        tid = str(uuid.uuid4())
        _trace_id.set(tid)
    return tid


def _add_trace_id(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: add trace_id to every log entry."""
    event_dict["trace_id"] = get_trace_id()
    return event_dict


def setup_logging(config: ObservabilityConfig | None = None) -> logging.Handler:
    """Route stdlib logging through structlog rendering.

    Replaces any handler a previous call installed, so calling it twice
    does not duplicate output.  Returns the installed handler.
    """
    config = config or ObservabilityConfig()
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        _add_trace_id,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    renderer: Any
    if config.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.set_name("order_management")

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == "order_management":
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)
    return handler


@contextmanager
def use_case_context(use_case: str, order_id: str = "") -> Iterator[str]:
    """Bind a new trace_id, the use case name and the order id for one call.

    Yields the trace_id.  Bindings are removed on exit.
    """
    tid = str(uuid.uuid4())
    token = _trace_id.set(tid)
    try:
        with structlog.contextvars.bound_contextvars(
            use_case=use_case, order_id=order_id
        ):
            yield tid
    finally:
        _trace_id.reset(token)
