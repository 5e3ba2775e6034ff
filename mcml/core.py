"""Launcher core: version constants and one-time initialisation."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from mcml import log

VERSION_NUM = 1
DATE = "20260412"
VERSION = f"{VERSION_NUM}-{DATE}"


@dataclass(frozen=True)
class CoreInitObj:
    """Arguments the core is initialised with."""

    local: str
    oauth_key: str
    curseforge_key: str


class CoreInitError(RuntimeError):
    """Raised when the core cannot be initialised."""


_lock = threading.Lock()
_core_arg: Optional[CoreInitObj] = None


def init(arg: CoreInitObj) -> None:
    """Initialise the core once and start logging under ``arg.local``."""
    global _core_arg
    if not arg.local:
        raise CoreInitError("Run local is empty")
    with _lock:
        if _core_arg is not None:
            raise CoreInitError("core already initialised")
        _core_arg = arg
    log.start(arg.local)


def base_dir() -> Optional[str]:
    """The run directory, or None before ``init``."""
    return _core_arg.local if _core_arg is not None else None


def core_arg() -> Optional[CoreInitObj]:
    """The initialisation arguments, or None before ``init``."""
    return _core_arg