"""Memo table for comparison results."""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Hashable, Optional

from .models import Operation

logger = logging.getLogger(__name__)


class ComparisonCache:
    """Insert-only mapping of operation -> operand key -> result.

    ``get``, ``in`` and ``len`` inspect stored entries without computing
    anything.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._entries: Optional[dict[Operation, dict[Hashable, Any]]] = None

    def fetch(self, operation: Operation, key: Hashable, compute: Callable[[], Any]) -> Any:
        """Return the stored result, computing and storing it on first use.

        ``compute`` runs while the lock is held, so it is called at most once
        per (operation, key). The lock is reentrant, so ``compute`` may call
        back into the cache from the same thread.
        """
        with self._lock:
            if self._entries is None:
                self._entries = {}
            bucket = self._entries.setdefault(operation, {})
            if key in bucket:
                return bucket[key]
            result = bucket.setdefault(key, compute())
            logger.debug("Cached %s %r -> %r", operation.value, key, result)
            return result

    def get(self, operation: Operation, key: Hashable, default: Any = None) -> Any:
        with self._lock:
            if self._entries is None:
                return default
            return self._entries.get(operation, {}).get(key, default)

    def __contains__(self, item: tuple[Operation, Hashable]) -> bool:
        operation, key = item
        with self._lock:
            if self._entries is None:
                return False
            return key in self._entries.get(operation, {})

    def __len__(self) -> int:
        with self._lock:
            if self._entries is None:
                return 0
            return sum(len(bucket) for bucket in self._entries.values())
