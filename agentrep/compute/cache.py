"""
AgentRep — Registry Cache
One in-memory snapshot of the fully scored registry.

Cache Strategy:
    - The whole scored list is cached as one immutable snapshot
    - TTL = 5 minutes (CACHE_TTL_SECONDS)
    - A rebuild replaces the snapshot in a single assignment, so readers
      see either the old list or the new one, never a mix
    - invalidate() forces the next read to rebuild

No module-level state: the service that owns the rebuild owns the cache.
"""
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

import structlog

logger = structlog.get_logger()

T = TypeVar("T")

DEFAULT_TTL = 300.0


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    data: Tuple[T, ...]
    timestamp: float


class RegistryCache(Generic[T]):
    """
    Usage:
        cache = RegistryCache(ttl=300)

        agents = cache.get()
        if agents is None:
            agents = await rebuild()
            cache.set(agents)
    """

    def __init__(self, ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic):
        if ttl < 0:
            raise ValueError("ttl must be non-negative")
        self.ttl = ttl
        self._clock = clock
        self._entry: Optional[CacheEntry[T]] = None
        self._hits = 0
        self._misses = 0

    def is_stale(self) -> bool:
        entry = self._entry
        return entry is None or self._clock() - entry.timestamp >= self.ttl

    def get(self) -> Optional[Tuple[T, ...]]:
        """Fresh snapshot, or None on miss / expiry."""
        entry = self._entry
        if entry is None or self._clock() - entry.timestamp >= self.ttl:
            self._misses += 1
            return None
        self._hits += 1
        return entry.data

    def peek(self) -> Optional[Tuple[T, ...]]:
        """Last snapshot regardless of age."""
        entry = self._entry
        return entry.data if entry else None

    def set(self, data) -> Tuple[T, ...]:
        snapshot = tuple(data)
        self._entry = CacheEntry(data=snapshot, timestamp=self._clock())
        logger.debug("registry_cache_set", size=len(snapshot), ttl=self.ttl)
        return snapshot

    def invalidate(self) -> bool:
        had_entry = self._entry is not None
        self._entry = None
        logger.info("registry_cache_invalidated", had_entry=had_entry)
        return had_entry

    def stats(self) -> Dict[str, Any]:
        entry = self._entry
        return {
            "cached_agents": len(entry.data) if entry else 0,
            "age_seconds": round(self._clock() - entry.timestamp, 1) if entry else None,
            "ttl_seconds": self.ttl,
            "stale": self.is_stale(),
            "hits": self._hits,
            "misses": self._misses,
        }
