"""Download items, tasks and the manager that stops them on shutdown."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, Iterable, Optional, Protocol, Union, runtime_checkable

from mcml import events


class DownloadItemState(Enum):
    """State of a single download."""

    WAIT = "Wait"
    DOWNLOAD = "Download"
    GET_INFO = "GetInfo"
    PAUSE = "Pause"
    INIT = "Init"
    ACTION = "Action"
    DONE = "Done"
    ERROR = "Error"


@runtime_checkable
class DownloadLater(Protocol):
    """Work run on the downloaded data once the download completes."""

    def run(self, reader: BinaryIO) -> None: ...


@dataclass(frozen=True)
class AddItem:
    """Items were added to the downloader."""

    count: int


@dataclass(frozen=True)
class ItemDone:
    """A download item finished."""


UpdateType = Union[AddItem, ItemDone]


@runtime_checkable
class DownloadGuiHandler(Protocol):
    """Receives downloader updates for display."""

    def update(self, thread: int, state: bool, count: int) -> None: ...

    def update_task(self, task_type: UpdateType) -> None: ...

    def update_item(self, thread: int, file: DownloadItem) -> None: ...


@runtime_checkable
class ProgressGuiHandler(Protocol):
    """Receives overall progress for a progress bar."""

    def set_now_progress(self, now: int, total: int) -> None: ...


@dataclass
class DownloadItem:
    """One file to download."""

    name: str
    url: str
    local: str
    overwrite: bool = False
    all_size: int = 0
    now_size: int = 0
    state: DownloadItemState = DownloadItemState.INIT
    error: int = 0
    md5: Optional[str] = None
    sha1: Optional[str] = None
    sha256: Optional[str] = None
    later: Optional[DownloadLater] = None

    def with_later(self, later: DownloadLater) -> DownloadItem:
        self.later = later
        return self

    def with_md5(self, md5: str) -> DownloadItem:
        self.md5 = md5
        return self

    def with_overwrite(self, overwrite: bool) -> DownloadItem:
        self.overwrite = overwrite
        return self

    def progress(self) -> float:
        """Percentage downloaded; 0 when the size is unknown."""
        if self.all_size > 0:
            return self.now_size / self.all_size * 100.0
        return 0.0


class DownloadTask:
    """A group of items downloaded together."""

    def __init__(
        self,
        gui: Optional[DownloadGuiHandler] = None,
        p_gui: Optional[ProgressGuiHandler] = None,
    ) -> None:
        self.gui = gui
        self.p_gui = p_gui
        self.items: list[DownloadItem] = []
        self.total_size = 0
        self.downloaded_size = 0
        self.completed_count = 0
        self.failed_count = 0
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def add_item(self, item: DownloadItem) -> None:
        self.total_size += item.all_size
        self.items.append(item)

    def progress(self) -> float:
        """Percentage of the task downloaded; 0 when the size is unknown."""
        if self.total_size > 0:
            return self.downloaded_size / self.total_size * 100.0
        return 0.0


@dataclass
class DownloadThread:
    """A download worker slot that can be told to stop."""

    id: int
    _stop: threading.Event = field(default_factory=threading.Event, repr=False, compare=False)

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def download_stop(self) -> None:
        self._stop.set()


class DownloadManager:
    """Holds pending items, tasks and worker slots; clears them on shutdown."""

    def __init__(
        self,
        threads: Iterable[DownloadThread] = (),
        tasks: Iterable[DownloadTask] = (),
    ) -> None:
        self.pending: deque[DownloadItem] = deque()
        self.threads: list[DownloadThread] = list(threads)
        self.tasks: list[DownloadTask] = list(tasks)
        self._stopped = False
        self._lock = threading.Lock()

    def init(self) -> None:
        """Register this manager to stop when the core stops."""
        events.add_stop_handler(self.stop)

    def stop(self) -> None:
        """Drop pending items, cancel tasks and stop workers, once."""
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            self.pending.clear()
        for task in list(self.tasks):
            task.cancel()
        for thread in self.threads:
            thread.download_stop()

    def get_state(self) -> bool:
        """Whether any worker is still running."""
        return not self._stopped and any(not t.stopped for t in self.threads)