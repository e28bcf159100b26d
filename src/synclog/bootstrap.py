"""Helpers for building configured logger instances."""

import os
import sys

from .core import SyncLog
from . import lifecycle


def open_output(output, encoding="utf-8"):
    """Resolve an output name to a sink; return (sink, owned)."""
    if output == "stdout":
        return sys.stdout, False
    if output == "stderr":
        return sys.stderr, False
    directory = os.path.dirname(output)
    if directory:
        os.makedirs(directory, exist_ok=True)
    return open(output, "a", encoding=encoding), True  # pylint: disable=consider-using-with


def build_logger(settings, sink=None, on_error=None):
    """Create a logger from settings and register lifecycle hooks."""
    owned = False
    if sink is None:
        sink, owned = open_output(settings.output, settings.encoding)
    instance = SyncLog(
        sink,
        error_mode=settings.error_mode,
        on_error=on_error if on_error is not None else settings.on_error,
        encoding=settings.encoding,
    )
    lifecycle.register_exit_hooks(
        sink,
        close=owned,
        enable_atexit=settings.enable_atexit,
    )
    if settings.filter_empty:
        return instance.filter_empty()
    return instance
