"""Process exit hook for flushing log sinks."""

import atexit


def register_exit_hooks(sink, close=False, enable_atexit=True):
    """Flush a sink at interpreter exit, or close it when synclog opened it."""
    def _cleanup():
        try:
            if close:
                sink.close()
            elif hasattr(sink, "flush"):
                sink.flush()
        except Exception:  # pylint: disable=broad-exception-caught
            pass

    if enable_atexit:
        atexit.register(_cleanup)
    return _cleanup
