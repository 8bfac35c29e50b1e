from .types import DELIMITER


# -----------------------------
# POSITIONAL FIELDS
# -----------------------------

def field_at(line: str, index: int) -> str:
    """
    Return the token at a zero-based position.

    Positions 0, 1 and 2 hold the syslog month, day and time.
    Past the last token the result is an empty string.
    """
    if index < 0:
        raise ValueError(f"field index must be >= 0, got {index}")

    tokens = line.split(DELIMITER)
    if index >= len(tokens):
        return ""

    return tokens[index]


# -----------------------------
# KEY=VALUE FIELDS
# -----------------------------

def field_by_key(line: str, key: str) -> str:
    """
    Return the value of the first segment containing `key`.

    Works for bare keys (service, policy_id) and for keys that
    carry their own '=' (src=, dst=). The segment runs up to the
    next delimiter or end of line; everything up to and including
    its first '=' is dropped:

      "...,src=10.1.1.5,src_port=4041"  key "src="  -> "10.1.1.5"
      "...,action=Permit"               key "action" -> "Permit"
    """
    start = line.find(key)
    if start == -1:
        return ""

    end = line.find(DELIMITER, start)
    segment = line[start:] if end == -1 else line[start:end]

    _, sep, value = segment.partition("=")
    return value if sep else segment
