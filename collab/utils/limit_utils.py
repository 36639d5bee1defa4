import re
from typing import Any

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def parse_limit(value: Any, default: int) -> int:
    """
    Coerce a ``limit`` query value into a non-negative int.

    Text is read like a browser's ``parseInt``: leading digits count and any
    trailing characters are ignored, so ``"5"`` and ``"5items"`` both give 5.
    Anything that yields no number falls back to ``default``. A negative number
    also falls back to ``default`` rather than trimming items off the end of the
    list the way a negative slice bound would; this is deliberate.
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, int):
        limit = value
    else:
        match = _LEADING_INTEGER.match(str(value))
        if not match:
            return default
        limit = int(match.group(1))

    return limit if limit >= 0 else default
