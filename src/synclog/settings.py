"""Settings and environment parsing for synclog."""

import os

from .core import ERROR_MODES, check_encoding


def _parse_bool(value):
    """Parse a boolean from environment-like values."""
    if isinstance(value, bool):
        return value
    if value is None:
        raise ValueError("bool value is None")
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"invalid boolean value: {value!r}")


def _parse_error_mode(value):
    """Parse error mode from string values."""
    text = str(value).strip().lower()
    if text in ERROR_MODES:
        return text
    raise ValueError(f"invalid error_mode: {value!r}")


def _parse_encoding(value):
    """Parse a codec name known to Python."""
    return check_encoding(str(value).strip())


class SyncLogSettings:  # pylint: disable=too-few-public-methods
    """Configuration container for synclog."""
    def __init__(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        output="stdout",
        error_mode="raise",
        encoding="utf-8",
        filter_empty=False,
        enable_atexit=True,
        on_error=None,
    ):
        self.output = output
        self.error_mode = error_mode
        self.encoding = encoding
        self.filter_empty = filter_empty
        self.enable_atexit = enable_atexit
        self.on_error = on_error

    @classmethod
    def from_env(cls):
        """Load settings from environment variables."""
        return cls.from_env_with_defaults()

    @classmethod
    def from_env_with_defaults(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        output="stdout",
        error_mode="raise",
        encoding="utf-8",
        filter_empty=False,
        enable_atexit=True,
        strict=False,
    ):
        """Load settings from env, falling back to supplied defaults."""
        strict_env = os.getenv("SYNCLOG_STRICT_ENV")
        if strict_env is not None and strict_env != "":
            try:
                strict = strict or _parse_bool(strict_env)
            except ValueError:
                if strict:
                    raise
                strict = False

        def _get(name, cast, default):
            val = os.getenv(name)
            if val is None or val == "":
                return default
            try:
                return cast(val)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                if strict:
                    raise ValueError(f"invalid value for {name}: {val!r}") from exc
                return default

        return cls(
            output=_get("SYNCLOG_OUTPUT", str, output),
            error_mode=_get("SYNCLOG_ERROR_MODE", _parse_error_mode, error_mode),
            encoding=_get("SYNCLOG_ENCODING", _parse_encoding, encoding),
            filter_empty=_get("SYNCLOG_FILTER_EMPTY", _parse_bool, filter_empty),
            enable_atexit=_get("SYNCLOG_ENABLE_ATEXIT", _parse_bool, enable_atexit),
        )

    def __repr__(self):
        return (
            f"<SyncLogSettings output={self.output!r} error_mode={self.error_mode!r} "
            f"filter_empty={self.filter_empty!r}>"
        )
