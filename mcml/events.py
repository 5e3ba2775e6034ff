"""Handlers run when the core shuts down."""

from __future__ import annotations

import threading
from typing import Callable

StopHandler = Callable[[], None]

_lock = threading.Lock()
_handlers: list[StopHandler] = []


def add_stop_handler(handler: StopHandler) -> None:
    """Register ``handler`` to run on shutdown."""
    with _lock:
        _handlers.append(handler)


def invoke_stop() -> None:
    """Run every registered handler in registration order."""
    with _lock:
        handlers = list(_handlers)
    for handler in handlers:
        handler()