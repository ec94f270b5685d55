"""Residual income projection.

Models recurring monthly revenue from customers enrolled during the OEP
over a five-year horizon. Each customer pays RESIDUAL_RATE_PER_CUSTOMER per
month while active. At every annual renewal after the first year, only
persistency_rate percent of the active customers carry over, and the decay
compounds (year 3's base is year 2's decayed base).

Precision: the running customer count is kept unrounded across years and
drives the dollar amounts. Only the reported active_customers field is
rounded.
"""

import logging
from datetime import date
from typing import Iterator, Tuple, Union

from .inputs import clamp_range, parse_float_or_default, round_half_up
from .schemas import MonthlyResidual, ProjectionResult, ResidualSchedule, YearlyResidual

logger = logging.getLogger(__name__)

RESIDUAL_RATE_PER_CUSTOMER = 2
RESIDUAL_YEARS = 5
MONTHS_PER_YEAR = 12
FIRST_YEAR_RETENTION = 100
DEFAULT_RESIDUAL_START = date(2026, 2, 1)


def _customer_bases(initial: float, retention: float, years: int) -> Iterator[float]:
    """Yield the unrounded active customer count for each year.

    Year 1 is the full enrolled base; each later year is the prior year's
    base times retention.
    """
    active = initial
    for year_index in range(years):
        if year_index > 0:
            active = active * retention
        yield active


def _yearly_residual(year_index: int, active: float, rate: float) -> YearlyResidual:
    monthly = active * RESIDUAL_RATE_PER_CUSTOMER
    return YearlyResidual(
        year=year_index + 1,
        active_customers=round_half_up(active),
        monthly_amount=monthly,
        year_total=monthly * MONTHS_PER_YEAR,
        retention_rate_applied=FIRST_YEAR_RETENTION if year_index == 0 else rate,
    )


def project_residuals(
    total_applications_in_period: float,
    persistency_rate: float = 100,
) -> ResidualSchedule:
    """Project five years of residual income.

    Args:
        total_applications_in_period: Customers enrolled during the OEP
        persistency_rate: Percent retained at each annual renewal, 0-100.
            Out-of-range values are clamped.

    Returns:
        ResidualSchedule with five YearlyResidual entries and their sum

    Example:
        project_residuals(1060, 70)
        # year 1: 1060 customers, $2,120/month
        # year 2: 742 customers, $1,484/month
        # year 3: 519 customers (1060 * 0.7 * 0.7 = 519.4)
    """
    rate = clamp_range(persistency_rate, 0, 100)
    if rate != persistency_rate:
        logger.warning(f"persistency_rate {persistency_rate} clamped to {rate}")
    initial = parse_float_or_default(total_applications_in_period, 0.0)

    yearly = tuple(
        _yearly_residual(year_index, active, rate)
        for year_index, active in enumerate(
            _customer_bases(initial, rate / 100, RESIDUAL_YEARS)
        )
    )

    total = sum(y.year_total for y in yearly)
    logger.debug(
        f"residuals: {initial} customers at {rate}% persistency -> {total:.2f} over {RESIDUAL_YEARS} years"
    )

    return ResidualSchedule(yearly_residuals=yearly, total_residuals=total)


def _add_months(start: date, months: int) -> date:
    """First day of the month `months` after start's month."""
    month_offset = start.month - 1 + months
    return date(start.year + month_offset // 12, month_offset % 12 + 1, 1)


def preview_monthly_residuals(
    schedule: Union[ResidualSchedule, ProjectionResult],
    months: int = 12,
    start: date = DEFAULT_RESIDUAL_START,
) -> Tuple[MonthlyResidual, ...]:
    """Expand a yearly schedule into calendar months.

    Args:
        schedule: Output of project_residuals or build_projection
        months: Number of months to preview, clamped to 1-60
        start: First month residuals are paid (default February 2026)

    Returns:
        Tuple of MonthlyResidual, one per month, in order
    """
    count = int(clamp_range(months, 1, RESIDUAL_YEARS * MONTHS_PER_YEAR))

    preview = []
    for offset in range(count):
        yearly = schedule.yearly_residuals[offset // MONTHS_PER_YEAR]
        month_start = _add_months(start, offset)
        preview.append(MonthlyResidual(
            month_index=offset + 1,
            label=month_start.strftime("%b %Y"),
            month_start=month_start,
            year=yearly.year,
            active_customers=yearly.active_customers,
            amount=yearly.monthly_amount,
        ))

    return tuple(preview)
