"""Background file logger that appends entries to ``logs.log``."""

from __future__ import annotations

import os
import queue
import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, TextIO

LOG_FILE_NAME = "logs.log"
_LINE_END = "\r\n" if os.name == "nt" else "\n"
_THREAD_NAME = "mcml log thread"


class LogLevel(Enum):
    """Severity of a log entry."""

    INFO = "Info"
    WARN = "Warn"
    ERROR = "Error"
    FAULT = "Fault"

    def __str__(self) -> str:
        return self.value


@dataclass
class LogItem:
    """A single log entry."""

    log: str
    level: LogLevel
    time: datetime = field(default_factory=datetime.now)

    def time_string(self) -> str:
        """Local time as ``Y-M-D H:M:S`` without zero padding."""
        t = self.time
        return f"{t.year}-{t.month}-{t.day} {t.hour}:{t.minute}:{t.second}"

    def format(self) -> str:
        """The line written to the log file, without its line ending."""
        return f"[{self.time_string()}][{self.level.value}]{self.log}"


class Logger:
    """Queues entries and writes them to a file from a background thread."""

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[Optional[LogItem]] = queue.SimpleQueue()
        self._lock = threading.Lock()
        self._file: Optional[TextIO] = None
        self._thread: Optional[threading.Thread] = None
        self._running = False
        self._started = False
        self.path: Optional[Path] = None

    def start(self, local: str | os.PathLike) -> None:
        """Open ``logs.log`` inside ``local`` and start the writer thread."""
        with self._lock:
            if self._started:
                raise RuntimeError("logger already started")
            path = Path(local) / LOG_FILE_NAME
            try:
                file = open(path, "a", encoding="utf-8", newline="")
            except OSError as exc:
                raise RuntimeError(f"log open fail: {path} - {exc}") from exc
            self.path = path
            self._file = file
            self._running = True
            self._started = True
            self._thread = threading.Thread(target=self.run, name=_THREAD_NAME, daemon=True)
            self._thread.start()

    def stop(self) -> None:
        """Stop the writer thread after it has written what is queued."""
        with self._lock:
            self._running = False
            thread, self._thread = self._thread, None
        if thread is None:
            return
        self._queue.put(None)
        thread.join()
        if self._file is not None:
            self._file.close()
            self._file = None

    def run(self) -> None:
        """Writer loop: wait for entries, write every queued one, repeat."""
        file = self._file
        if file is None:
            raise RuntimeError("logger not started")
        while True:
            batch = [self._queue.get()]
            while True:
                try:
                    batch.append(self._queue.get_nowait())
                except queue.Empty:
                    break
            for item in batch:
                if item is not None:
                    file.write(item.format() + _LINE_END)
            file.flush()
            if not self._running:
                return

    def _push(self, text: str, level: LogLevel) -> None:
        if not self._started:
            raise RuntimeError("logger not started")
        self._queue.put(LogItem(text, level))

    def info(self, text: str) -> None:
        self._push(text, LogLevel.INFO)

    def warn(self, text: str) -> None:
        self._push(text, LogLevel.WARN)

    def error(self, text: str) -> None:
        self._push(text, LogLevel.ERROR)

    def fault(self, text: str) -> None:
        self._push(text, LogLevel.FAULT)


_default = Logger()


def start(local: str | os.PathLike) -> None:
    """Start the process-wide logger."""
    _default.start(local)


def stop() -> None:
    """Stop the process-wide logger."""
    _default.stop()


def info(text: str) -> None:
    _default.info(text)


def warn(text: str) -> None:
    _default.warn(text)


def error(text: str) -> None:
    _default.error(text)


def fault(text: str) -> None:
    _default.fault(text)