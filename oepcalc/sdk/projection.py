"""Cumulative earnings projection.

Composes the three engine stages in a fixed order:

    compute_daily_pay -> project_period (daily total)
                      -> project_residuals (period total applications)

and sums OEP pay with five years of residuals into a cumulative total.
"""

import logging
from typing import Optional

from .compensation import compute_daily_pay
from .period import project_period
from .residuals import project_residuals
from .schemas import (
    CompensationModel,
    DailyInputs,
    ModelComparison,
    PeriodConfig,
    ProjectionResult,
    ResidualConfig,
)

logger = logging.getLogger(__name__)


def build_projection(
    model: CompensationModel,
    daily_inputs: DailyInputs,
    period_config: Optional[PeriodConfig] = None,
    residual_config: Optional[ResidualConfig] = None,
) -> ProjectionResult:
    """Build the full projection for one compensation model.

    Args:
        model: Compensation model
        daily_inputs: Applications and hours per day
        period_config: Working days (default 53)
        residual_config: Persistency rate (default 100)

    Returns:
        ProjectionResult where cumulative_total == period.total_pay + total_residuals
    """
    period_config = period_config or PeriodConfig()
    residual_config = residual_config or ResidualConfig()
    model = CompensationModel(model)

    daily = compute_daily_pay(model, daily_inputs.applications_per_day, daily_inputs.hours_worked)
    period = project_period(daily.total_pay, daily_inputs.applications_per_day, period_config.working_days)
    residuals = project_residuals(period.total_applications, residual_config.persistency_rate)

    result = ProjectionResult(
        model=model,
        daily=daily,
        period=period,
        yearly_residuals=residuals.yearly_residuals,
        total_residuals=residuals.total_residuals,
        cumulative_total=period.total_pay + residuals.total_residuals,
    )
    logger.debug(
        f"{model.value}: daily {daily.total_pay:.2f}, OEP {period.total_pay:.2f}, "
        f"residuals {residuals.total_residuals:.2f}, cumulative {result.cumulative_total:.2f}"
    )
    return result


def compare_models(
    daily_inputs: DailyInputs,
    period_config: Optional[PeriodConfig] = None,
    residual_config: Optional[ResidualConfig] = None,
) -> ModelComparison:
    """Evaluate both compensation models on the same inputs.

    Returns:
        ModelComparison with both projections, absolute differences, and the
        model with the higher OEP pay (Hourly + Commission on a tie)
    """
    hourly = build_projection(
        CompensationModel.HOURLY_PLUS_COMMISSION, daily_inputs, period_config, residual_config
    )
    commission = build_projection(
        CompensationModel.COMMISSION_ONLY, daily_inputs, period_config, residual_config
    )

    if hourly.period.total_pay >= commission.period.total_pay:
        better = CompensationModel.HOURLY_PLUS_COMMISSION
    else:
        better = CompensationModel.COMMISSION_ONLY

    return ModelComparison(
        hourly_plus_commission=hourly,
        commission_only=commission,
        daily_pay_difference=abs(hourly.daily.total_pay - commission.daily.total_pay),
        period_pay_difference=abs(hourly.period.total_pay - commission.period.total_pay),
        monthly_residual_difference=abs(
            hourly.first_year_monthly_residual - commission.first_year_monthly_residual
        ),
        better_model=better,
    )
