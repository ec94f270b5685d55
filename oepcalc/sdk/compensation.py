"""Daily pay under each compensation model.

SDK layer - pure logic, no I/O. Inputs are clamped to non-negative
before use, so every call returns a result.

Rates:
- Hourly + Commission: $12/hour, plus $15 per application beyond the
  5th each day (apps 1-5 earn hourly pay only).
- Commission Only: $15 per approved application.
"""

from .inputs import clamp_non_negative
from .schemas import CompensationModel, DailyPayResult

HOURLY_RATE = 12
PER_APP_RATE = 15
COMMISSION_THRESHOLD = 5


def compute_daily_pay(
    model: CompensationModel,
    applications_per_day: float,
    hours_worked: float,
) -> DailyPayResult:
    """Compute one day's pay.

    Args:
        model: Compensation model to apply
        applications_per_day: Approved applications completed in the day
        hours_worked: Hours worked in the day (ignored for COMMISSION_ONLY)

    Returns:
        DailyPayResult with hourly, commission and total pay

    Example:
        compute_daily_pay(CompensationModel.HOURLY_PLUS_COMMISSION, 20, 8)
        # -> hourly 96, commission 225 (15 apps over threshold), total 321
    """
    apps = clamp_non_negative(applications_per_day)
    hours = clamp_non_negative(hours_worked)
    model = CompensationModel(model)

    if model is CompensationModel.HOURLY_PLUS_COMMISSION:
        hourly = HOURLY_RATE * hours
        commission = PER_APP_RATE * max(apps - COMMISSION_THRESHOLD, 0)
    elif model is CompensationModel.COMMISSION_ONLY:
        hourly = 0.0
        commission = PER_APP_RATE * apps
    else:
        raise AssertionError(f"Unhandled compensation model: {model}")

    return DailyPayResult(
        hourly_pay=hourly,
        commission_pay=commission,
        total_pay=hourly + commission,
    )
