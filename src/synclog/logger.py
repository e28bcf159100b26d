from .bootstrap import build_logger
from .lazy import LazyLogger
from .settings import SyncLogSettings


def _build_logger():
    return build_logger(SyncLogSettings.from_env())


logger = LazyLogger(_build_logger)
