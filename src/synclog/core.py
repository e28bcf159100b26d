"""Synchronized writer and empty-message filter."""

import abc
import codecs
import io
import sys
import threading
import traceback

NEWLINE = "\n"

ERROR_MODES = ("raise", "silent", "stderr")


class SinkWriteError(Exception):
    """Raised when the underlying sink rejects a write or flush.

    ``written`` is True when the payload reached the sink and only the
    flush failed; retrying such a message duplicates it.
    """
    def __init__(self, message, sink, written=False):
        super().__init__(f"failed to write to sink {sink!r}")
        self.message = message
        self.sink = sink
        self.written = written


def check_encoding(encoding):
    """Return the encoding name if Python knows the codec, else raise ValueError."""
    try:
        codecs.lookup(encoding)
    except (LookupError, TypeError) as exc:
        raise ValueError(f"unsupported encoding: {encoding!r}") from exc
    return encoding


def _render_one(value):
    """Return the default text form of value, never raising."""
    if type(value) is str:  # pylint: disable=unidiomatic-typecheck
        return value
    try:
        return str(value)
    except Exception:  # pylint: disable=broad-exception-caught
        return f"<unprintable {type(value).__name__} object>"


def render(values):
    """Concatenate the default text form of each value without separators."""
    return "".join(_render_one(v) for v in values)


def _is_text_sink(sink):
    """Tell whether sink takes str rather than bytes."""
    if isinstance(sink, io.TextIOBase):
        return True
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return False
    return getattr(sink, "encoding", None) is not None


class Logger(abc.ABC):  # pylint: disable=too-few-public-methods
    """Anything that can log a sequence of values."""

    @abc.abstractmethod
    def log(self, *values):
        """Log values; return True when they reached a sink."""


class SyncLog(Logger):
    """Serialize log calls to a sink and end every message with one newline.

    The sink is owned by the caller. It may be a text stream (``sys.stdout``,
    ``io.StringIO``, a text file) or a binary one (``io.BytesIO``, a binary
    file, ``socket.makefile("wb")``); binary sinks get ``encoding``-encoded
    payloads.
    """
    def __init__(self, sink, error_mode="raise", on_error=None, encoding="utf-8"):
        if error_mode not in ERROR_MODES:
            raise ValueError(f"unsupported error_mode: {error_mode!r}")
        self._lock = threading.Lock()
        self._sink = sink
        self._error_mode = error_mode
        self._on_error = on_error
        self._encoding = check_encoding(encoding)

    @property
    def sink(self):
        """Current sink."""
        return self._sink

    @property
    def error_mode(self):
        return self._error_mode

    def log(self, *values):
        """Write the rendered values as one newline-terminated message.

        Returns True once the payload is in the sink, even if the flush
        that follows fails; that failure is still reported through the
        error mode.
        """
        out = render(values)
        if not out or out[-1] != NEWLINE:
            out += NEWLINE
        written = False
        with self._lock:
            sink = self._sink
            try:
                self._write(sink, out)
                written = True
                self._flush(sink)
                return True
            except Exception as exc:  # pylint: disable=broad-exception-caught
                failure = exc
        return self._handle_error(out, sink, failure, written)

    def _write(self, sink, out):
        """Write one payload."""
        if _is_text_sink(sink):
            sink.write(out)
        else:
            sink.write(out.encode(self._encoding))

    def _flush(self, sink):
        flush = getattr(sink, "flush", None)
        if flush is not None:
            flush()

    def _handle_error(self, message, sink, exc, written):
        """Handle a failed write or flush based on the configured error mode."""
        if self._on_error is not None:
            try:
                self._on_error(message, exc)
            except Exception:  # pylint: disable=broad-exception-caught
                pass
        if self._error_mode == "raise":
            raise SinkWriteError(message, sink, written=written) from exc
        if self._error_mode == "stderr":
            detail = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
            sys.stderr.write(detail)
            sys.stderr.flush()
        return written

    def set_output(self, sink):
        """Replace the sink.

        This does not take the lock: call it during setup, while no other
        thread is logging through this writer.
        """
        self._sink = sink

    def filter_empty(self):
        """Return a wrapper that drops empty and None messages."""
        return FilterEmpty(self)

    def __repr__(self):
        return f"<SyncLog sink={self._sink!r} error_mode={self._error_mode!r}>"


class FilterEmpty(Logger):
    """Forward to a SyncLog only when there is something to log.

    Handy for logging errors that may be None::

        log = SyncLog(sys.stderr).filter_empty().log
        log(err)  # nothing when err is None
    """
    def __init__(self, writer):
        self._writer = writer

    @property
    def writer(self):
        """Wrapped SyncLog."""
        return self._writer

    def log(self, *values):
        """Log values unless there are none, a lone None, or they render empty."""
        if not values:
            return False
        if len(values) == 1 and values[0] is None:
            return False
        out = render(values)
        if out == "":
            return False
        return self._writer.log(out)

    def __repr__(self):
        return f"<FilterEmpty writer={self._writer!r}>"
