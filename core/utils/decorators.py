"""Reusable decorators for sync operations."""

import functools
import time
from typing import Callable

from core.utils.logging import get_logger

logger = get_logger(__name__)


def log_time(func: Callable) -> Callable:
    """
    Log execution time of a function at debug level.

    The duration is logged whether the call returns or raises.

    Usage:
        @log_time
        def put(self, indir):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start
            logger.debug(f"{func.__name__} finished in {elapsed:.3f}s")

    return wrapper
