import logging
import socket
from dataclasses import dataclass
from typing import Callable

from fwsyslog.types import CacheEntry
from store import ResolutionCache


logger = logging.getLogger("fwsyslog.resolver")


LookupFn = Callable[[str], str]


def reverse_lookup(ip: str) -> str:
    """
    Blocking PTR lookup through the system resolver.

    Raises OSError (socket.herror / socket.gaierror) when no name
    is available; timeouts are the OS resolver's.
    """
    hostname, _aliases, _addresses = socket.gethostbyaddr(ip)
    return hostname


@dataclass
class ResolverStats:
    lookups: int = 0
    hits: int = 0
    misses: int = 0
    failures: int = 0
    evictions: int = 0


class HostnameResolver:
    def __init__(
        self,
        cache: ResolutionCache | None = None,
        lookup: LookupFn = reverse_lookup,
    ):
        self.cache = cache if cache is not None else ResolutionCache()
        self.lookup = lookup
        self.stats = ResolverStats()

    def resolve(self, ip: str) -> str:
        """
        Hostname for ip, or ip itself when it cannot be resolved.

        Failed lookups are cached too, so an address without a PTR
        record is only queried once while it stays cached.
        """
        if not ip:
            return ip

        self.stats.lookups += 1
        cached = self.cache.get(ip)
        if cached is not None:
            self.stats.hits += 1
            return cached

        self.stats.misses += 1
        hostname = self._lookup(ip)
        if self.cache.add(CacheEntry(ip_address=ip, hostname=hostname)) is not None:
            self.stats.evictions += 1
        return hostname

    def _lookup(self, ip: str) -> str:
        try:
            hostname = self.lookup(ip)
        except (OSError, ValueError) as e:
            self.stats.failures += 1
            logger.debug("reverse lookup failed for %s: %s", ip, e)
            return ip

        return hostname or ip
