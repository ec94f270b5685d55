"""Display formatting for projection values.

Currency is shown in whole US dollars with thousands separators and no
cents, matching an en-US currency formatter configured for zero fraction
digits (halves round away from zero). Rounding happens here and only
here; the engine keeps full precision.
"""

from decimal import Decimal, ROUND_HALF_UP


def _whole(value: float) -> int:
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_currency(value: float) -> str:
    """Format as whole dollars.

    Examples:
        format_currency(17013)     # -> "$17,013"
        format_currency(1484.4)    # -> "$1,484"
        format_currency(-250.5)    # -> "-$251"
    """
    dollars = _whole(value)
    if dollars < 0:
        return f"-${-dollars:,}"
    return f"${dollars:,}"


def format_count(value: float) -> str:
    """Format a count with thousands separators ("1,060")."""
    return f"{_whole(value):,}"


def format_percent(value: float) -> str:
    """Format a percentage without decimals when whole ("70%", "72.5%")."""
    if float(value).is_integer():
        return f"{int(value)}%"
    return f"{value:g}%"
