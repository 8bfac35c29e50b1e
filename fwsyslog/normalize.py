import re
from typing import List, Tuple

from .types import DELIMITER


SPACE_RUN = re.compile(r" {2,}")


# Ordered rewrite rules, applied after spaces become delimiters.
# They re-join values the device writes with embedded spaces.
REWRITE_RULES: List[Tuple[str, str]] = [
    # "MS-RPC Endpoint Mapper" service name
    (",Endpoint,Mapper", " Endpoint Mapper"),

    # ntp service name
    ("Network,Time", "Network Time"),

    # zone keys are logged as "src zone=" / "dst zone="
    (",src,zone", ",src_zone"),
    (",dst,zone", ",dst_zone"),
]


def normalize(raw_line: str) -> str:
    """
    Turn a whitespace separated firewall line into a delimited one.

    This function must be:
    - deterministic
    - order-dependent
    - side-effect free

    It should NEVER throw.
    """
    if not raw_line:
        return ""

    normalized = SPACE_RUN.sub(" ", raw_line)
    normalized = normalized.replace(" ", DELIMITER)

    for search, replacement in REWRITE_RULES:
        normalized = normalized.replace(search, replacement)

    return normalized
