import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from store import DEFAULT_MAX_CACHED_HOSTNAMES


logger = logging.getLogger("fwsyslog.settings")


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = -1

    if value < 0:
        logger.warning("ignoring %s=%r, using %d", name, raw, default)
        return default
    return value


@dataclass(frozen=True)
class Settings:
    # Hostname cache
    max_cached_hostnames: int

    # Defaults for -s / -d
    resolve_src: bool
    resolve_dst: bool

    # Diagnostics go to stderr
    log_level: str


def load_settings() -> Settings:
    load_dotenv()

    return Settings(
        max_cached_hostnames=_get_int(
            "FWSYSLOG_MAX_CACHED_HOSTNAMES", DEFAULT_MAX_CACHED_HOSTNAMES
        ),
        resolve_src=_get_bool("FWSYSLOG_RESOLVE_SRC"),
        resolve_dst=_get_bool("FWSYSLOG_RESOLVE_DST"),
        log_level=os.getenv("FWSYSLOG_LOG_LEVEL", "WARNING").strip().upper(),
    )
