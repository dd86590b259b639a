import threading
import time
from typing import Callable, Dict, Iterable, Optional, Tuple

from ..models.news import Article


DEFAULT_TTL_SECONDS = 300.0


class CacheStore:
    """In-memory, key-addressed article cache with a fixed TTL.

    Entries expire ``ttl_seconds`` after they were last written. Expired
    entries read as misses; they are dropped on the next ``set``.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Tuple[Article, ...]]] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def _is_live(self, inserted_at: float, now: float) -> bool:
        return now - inserted_at < self._ttl

    def get(self, key: str) -> Optional[Tuple[Article, ...]]:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        inserted_at, value = entry
        if not self._is_live(inserted_at, self._clock()):
            return None
        return value

    def set(self, key: str, value: Iterable[Article]) -> None:
        now = self._clock()
        with self._lock:
            self._purge_expired(now)
            self._entries[key] = (now, tuple(value))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _purge_expired(self, now: float) -> None:
        # Caller holds the lock.
        expired = [k for k, (ts, _) in self._entries.items() if not self._is_live(ts, now)]
        for key in expired:
            del self._entries[key]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __len__(self) -> int:
        now = self._clock()
        with self._lock:
            return sum(1 for ts, _ in self._entries.values() if self._is_live(ts, now))
