from enum import Enum, auto

from .types import DELIMITER


class LineKind(Enum):
    """
    What a normalized firewall line carries.

    This is about routing, not content.
    """
    TRAFFIC = auto()
    STATISTICS = auto()
    EMPTY = auto()


# Devices periodically report their own logging counters
STATISTICS_MARKER = ",Log,statistics;"


def is_statistics_line(normalized_line: str) -> bool:
    return STATISTICS_MARKER in normalized_line


def classify_line(normalized_line: str) -> LineKind:
    """
    Classify a normalized line.

    Anything that is not empty and not a statistics report is
    treated as traffic; missing fields are handled downstream.
    """
    if not normalized_line.strip(DELIMITER):
        return LineKind.EMPTY

    if is_statistics_line(normalized_line):
        return LineKind.STATISTICS

    return LineKind.TRAFFIC
