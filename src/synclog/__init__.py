"""Synchronized logging to any writable sink.

    from synclog import SyncLog

    log = SyncLog(sys.stdout).log
    log("some", "nice", "message")

    # Log errors only if there are any
    log = SyncLog(sys.stderr).filter_empty().log
    log(None)  # nothing
    log(EOFError("unexpected end"))
"""

from .logger import logger
from .core import FilterEmpty, Logger, SinkWriteError, SyncLog, render
from .settings import SyncLogSettings
from .bootstrap import build_logger

__all__ = [
    "logger",
    "Logger",
    "SyncLog",
    "FilterEmpty",
    "SinkWriteError",
    "SyncLogSettings",
    "build_logger",
    "render",
]
