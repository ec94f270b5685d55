"""Input sanitizing helpers.

The calculator is total over its numeric domain: values that are negative,
missing or unparseable fall back to zero or a default instead of raising.
These helpers keep that policy in one place for the engine, the CLI and
the MCP tools.
"""

import logging
import math
from decimal import ROUND_HALF_CEILING, Decimal
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Daily application count above which the agent is warned the
# estimate may be unrealistic.
HIGH_VOLUME_THRESHOLD = 20
HIGH_VOLUME_WARNING = "High volume detected - ensure this is realistic for your workflow."


def _to_float(value: Any) -> Optional[float]:
    """Convert to a finite float, or None if that isn't possible.

    Infinity counts as unusable alongside NaN: an infinite day of hours or
    applications has no meaningful pay, so it is clamped to 0 rather than
    kept as a non-negative number.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def clamp_non_negative(value: Any) -> float:
    """Clamp a value to >= 0, treating None/NaN/non-numeric input as 0.

    Examples:
        clamp_non_negative(8)      # -> 8.0
        clamp_non_negative(-3)     # -> 0.0
        clamp_non_negative("abc")  # -> 0.0
    """
    number = _to_float(value)
    if number is None:
        logger.debug(f"non-numeric input {value!r} treated as 0")
        return 0.0
    if number < 0:
        logger.debug(f"negative input {number} clamped to 0")
        return 0.0
    return number


def clamp_range(value: Any, low: float, high: float) -> float:
    """Clamp a value into [low, high]. Non-numeric input becomes low."""
    number = _to_float(value)
    if number is None:
        return low
    return min(max(number, low), high)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +inf.

    Python's round() uses banker's rounding (round(2.5) == 2). Displayed
    counts round halves up instead (2.5 -> 3, -2.5 -> -2). The exact
    binary value is rounded, so 0.49999999999999994 stays 0.
    """
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_CEILING))


def parse_int_or_default(text: Any, default: int) -> int:
    """Parse a form-style integer, falling back to default.

    Mirrors how a number input behaves when the field is cleared or holds
    garbage: leading digits are accepted ("12abc" -> 12), a float string is
    truncated ("7.9" -> 7), anything else, and zero, yields default.

    Examples:
        parse_int_or_default("60", 53)   # -> 60
        parse_int_or_default("", 53)     # -> 53
        parse_int_or_default("abc", 53)  # -> 53
    """
    if isinstance(text, bool) or text is None:
        return default
    if isinstance(text, int):
        return text or default
    if isinstance(text, float):
        if not math.isfinite(text):
            return default
        return int(text) or default

    s = str(text).strip()
    sign = 1
    if s[:1] in ("-", "+"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]

    digits = ""
    for ch in s:
        if ch not in "0123456789":
            break
        digits += ch

    if not digits:
        return default
    return (sign * int(digits)) or default


def parse_float_or_default(text: Any, default: float) -> float:
    """Parse a float, falling back to default when it isn't a finite number."""
    if isinstance(text, str):
        text = text.strip()
    number = _to_float(text)
    if number is None:
        return default
    return number


def high_volume_warning(applications_per_day: float) -> Optional[str]:
    """Return a warning when daily applications exceed HIGH_VOLUME_THRESHOLD."""
    if applications_per_day > HIGH_VOLUME_THRESHOLD:
        logger.debug(f"{applications_per_day} applications/day exceeds {HIGH_VOLUME_THRESHOLD}")
        return HIGH_VOLUME_WARNING
    return None
