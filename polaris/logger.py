"""Process-wide logger writing timestamped lines to the console and a log file."""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import IO, Optional, Union

DEFAULT_LOG_FILE = "vega42.log"


class LogLevel(IntEnum):
    """Severity of a log message, ordered from most to least verbose."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5

    @property
    def label(self) -> str:
        """The name shown between brackets in a log line."""
        return self.name


def _timestamp() -> str:
    now = datetime.now()
    return f"{now.strftime('%Y-%m-%d %H:%M:%S')}.{now.microsecond // 1000:03d}"


def _format(message: str, level: LogLevel) -> str:
    return f"[{_timestamp()}] [{LogLevel(level).label}] {message}"


class _Sink:
    """Output state that exists only while the logger is initialized."""

    def __init__(self, log_file: Optional[IO[str]]) -> None:
        self.log_file = log_file
        self.lock = threading.Lock()

    def to_console(self, message: str, level: LogLevel) -> None:
        with self.lock:
            print(_format(message, level), file=sys.stdout, flush=True)

    def to_file(self, message: str, level: LogLevel) -> None:
        if self.log_file is None or self.log_file.closed:
            return
        with self.lock:
            self.log_file.write(_format(message, level) + "\n")
            self.log_file.flush()

    def close(self) -> None:
        if self.log_file is not None and not self.log_file.closed:
            self.log_file.close()


class Logger:
    """Logger that writes each accepted message to stdout and to a log file.

    Messages are dropped until :meth:`initialize` has been called and after
    :meth:`shutdown`. Messages below the current level are dropped too.
    """

    _shared: Optional["Logger"] = None
    _shared_lock = threading.Lock()

    def __init__(self) -> None:
        self._sink: Optional[_Sink] = None
        self._initialized = False
        self._level = LogLevel.INFO

    @classmethod
    def get_instance(cls) -> "Logger":
        """Return the process-wide logger, creating it on first use."""
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def level(self) -> LogLevel:
        return self._level

    def initialize(self, log_file: Union[str, Path] = DEFAULT_LOG_FILE) -> None:
        """Open ``log_file`` for appending and start accepting messages.

        Calling it again while initialized does nothing. If the file cannot be
        opened, a note goes to stderr and only console output is produced.
        """
        if self._initialized:
            return
        handle: Optional[IO[str]]
        try:
            handle = open(log_file, "a", encoding="utf-8")
        except OSError:
            handle = None
            print(f"Failed to open log file: {log_file}", file=sys.stderr, flush=True)
        self._sink = _Sink(handle)
        self._initialized = True
        self.info("Logger initialized")

    def shutdown(self) -> None:
        """Log the shutdown, close the log file and stop accepting messages."""
        if not self._initialized:
            return
        self.info("Logger shutting down")
        if self._sink is not None:
            self._sink.close()
        self._sink = None
        self._initialized = False

    def set_log_level(self, level: LogLevel) -> None:
        """Drop messages less severe than ``level`` from now on."""
        self._level = LogLevel(level)

    def _emit(self, message: str, level: LogLevel) -> None:
        if self._level <= level and self._sink is not None:
            self._sink.to_console(message, level)
            self._sink.to_file(message, level)

    def trace(self, message: str) -> None:
        self._emit(message, LogLevel.TRACE)

    def debug(self, message: str) -> None:
        self._emit(message, LogLevel.DEBUG)

    def info(self, message: str) -> None:
        self._emit(message, LogLevel.INFO)

    def warn(self, message: str) -> None:
        self._emit(message, LogLevel.WARN)

    def error(self, message: str) -> None:
        self._emit(message, LogLevel.ERROR)

    def critical(self, message: str) -> None:
        self._emit(message, LogLevel.CRITICAL)

    def log_to_console(self, message: str, level: LogLevel) -> None:
        """Write one line to stdout regardless of the current level."""
        if self._sink is not None:
            self._sink.to_console(message, LogLevel(level))

    def log_to_file(self, message: str, level: LogLevel) -> None:
        """Write one line to the log file regardless of the current level."""
        if self._sink is not None:
            self._sink.to_file(message, LogLevel(level))