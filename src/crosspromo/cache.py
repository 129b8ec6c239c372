from typing import Any, Callable, Dict, Iterable, Optional, Tuple
import logging
import threading
import time

logger = logging.getLogger(__name__)


def make_key(prefix: str, ids: Iterable[int] = (), **flags) -> str:
    """Canonical cache key: ids are sorted, flags appended in name order."""
    parts = [prefix, "_".join(str(i) for i in sorted(set(ids)))]
    for name in sorted(flags):
        parts.append(f"{name}={flags[name]}")
    return "|".join(parts)


class ResultCache:
    """In-memory cache whose entries expire after a fixed TTL.

    Expired entries are only removed when they are read. There is no size
    bound, so the cache grows for the life of the process.
    """

    def __init__(self, ttl_seconds: float = 300, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, stored_at = entry
            if self._clock() - stored_at > self.ttl_seconds:
                del self._entries[key]
                logger.debug("Cache entry %s expired", key)
                return None
            logger.debug("Cache hit for %s", key)
            return value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
