import logging
from collections import deque
from typing import Deque, List, Optional

from fwsyslog.types import CacheEntry


DEFAULT_MAX_CACHED_HOSTNAMES = 15

logger = logging.getLogger("fwsyslog.cache")


class ResolutionCache:
    """
    Bounded store of reverse DNS answers, most recent first.

    Inserting into a full cache drops the oldest insertion.
    Lookups never reorder entries.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_CACHED_HOSTNAMES):
        if max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {max_size}")

        self.max_size = max_size
        self.evictions = 0

        # left end is the most recent insertion
        self._entries: Deque[CacheEntry] = deque(maxlen=max_size)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, ip_address: str) -> bool:
        return self.get(ip_address) is not None

    # ---------- Read API ----------

    def get(self, ip_address: str) -> Optional[str]:
        for entry in self._entries:
            if entry.ip_address == ip_address:
                return entry.hostname
        return None

    def entries(self) -> List[CacheEntry]:
        return list(self._entries)

    # ---------- Write API ----------

    def add(self, entry: CacheEntry) -> Optional[CacheEntry]:
        """
        Insert entry as the most recent; returns the entry it displaced.
        """
        if self.max_size == 0:
            return None

        evicted = None
        if len(self._entries) == self.max_size:
            evicted = self._entries.pop()
            self.evictions += 1
            logger.debug(
                "evicted %s -> %s", evicted.ip_address, evicted.hostname
            )

        self._entries.appendleft(entry)
        return evicted
