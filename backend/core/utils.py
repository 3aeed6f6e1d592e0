from datetime import datetime
from typing import Any, Optional
import math
import re

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

def locale_timestamp(now: Optional[datetime] = None) -> str:
    """Local time in the en-US locale layout, e.g. '10/18/2026, 3:04:05 PM'."""
    now = now or datetime.now()
    hour = now.hour % 12 or 12
    return f"{now.month}/{now.day}/{now.year}, {hour}:{now:%M:%S} {now:%p}"

def parse_int(value: Any) -> Optional[int]:
    """
    Lenient integer coercion for form values.
    Accepts ints, finite floats (truncated) and strings starting with an integer ("80 l").
    Returns None when nothing usable is found.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        m = _LEADING_INT.match(value)
        if not m:
            return None
        try:
            return int(m.group(1))
        except ValueError:
            # past the interpreter's int string conversion digit limit
            return None
    return None
