"""Scale daily results across the enrollment period."""

from .schemas import PeriodResult

DEFAULT_WORKING_DAYS = 53


def project_period(
    daily_total_pay: float,
    applications_per_day: float,
    working_days: float = DEFAULT_WORKING_DAYS,
) -> PeriodResult:
    """Project daily pay and applications across the OEP.

    Linear scaling with no rounding. working_days is not validated: zero or
    negative values yield zero or negative totals.

    Args:
        daily_total_pay: Total pay for one day
        applications_per_day: Applications completed per day
        working_days: Working days in the period (default 53)

    Returns:
        PeriodResult with total applications and total pay
    """
    return PeriodResult(
        total_applications=applications_per_day * working_days,
        total_pay=daily_total_pay * working_days,
    )
