"""Log output, hex dumps and CBOR display for diagnostics."""

from __future__ import annotations

import os
import subprocess
import sys
from enum import IntEnum
from typing import Callable, Optional, Union


class LogLevel(IntEnum):
    """Severity of a log message, most severe first."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def label(self) -> str:
        """Short tag printed in front of a message."""
        return _LABELS[self]


_LABELS = {
    LogLevel.EMERG: "EMRG",
    LogLevel.ALERT: "ALRT",
    LogLevel.CRIT: "CRIT",
    LogLevel.ERR: "ERR",
    LogLevel.WARNING: "WARN",
    LogLevel.NOTICE: "NOTE",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBG",
}

LogHandler = Callable[[LogLevel, str], None]

DEFAULT_LOG_LEVEL = LogLevel.WARNING
CBOR2PRETTY = "cbor2pretty.rb"
"""External program used to display CBOR data."""

_MAX_HANDLER_MESSAGE = 127

_max_level: LogLevel = DEFAULT_LOG_LEVEL
_handler: Optional[LogHandler] = None


def get_log_level() -> LogLevel:
    """Return the most verbose level that is currently output."""
    return _max_level


def set_log_level(level: Union[LogLevel, int]) -> None:
    """Set the most verbose level that is output."""
    global _max_level
    _max_level = LogLevel(level)


def set_log_handler(handler: Optional[LogHandler]) -> None:
    """Route log messages to ``handler``; None restores console output."""
    global _handler
    _handler = handler


def log(level: Union[LogLevel, int], message: str) -> None:
    """Emit ``message`` at ``level`` if the current log level permits it."""
    level = LogLevel(level)
    if _max_level < level:
        return
    if _handler is not None:
        _handler(level, message[:_MAX_HANDLER_MESSAGE])
        return
    stream = sys.stderr if level <= LogLevel.CRIT else sys.stdout
    stream.write(f"{level.label} {message}")
    stream.flush()


def hexdump(data: bytes) -> None:
    """Print ``data`` as hex, eight bytes per line, at debug level only."""
    if _max_level < LogLevel.DEBUG:
        return
    out = sys.stdout
    for count, octet in enumerate(bytes(data), start=1):
        out.write(f"{octet:02x}")
        out.write("\n" if count % 8 == 0 else " ")
    out.write("\n")
    out.flush()


def show_cbor(data: bytes) -> None:
    """Pipe ``data`` to the CBOR pretty printer unless running as root."""
    geteuid = getattr(os, "geteuid", None)
    if geteuid is not None and geteuid() == 0:
        return
    try:
        process = subprocess.Popen(
            [CBOR2PRETTY],
            stdin=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return
    try:
        process.communicate(bytes(data))
    except (BrokenPipeError, OSError):
        sys.stdout.write(f"error when writing to '{CBOR2PRETTY}'\n")
        sys.stdout.flush()
        process.wait()