"""Tests for build_projection and compare_models."""

import pytest

from oepcalc.sdk import (
    CompensationModel,
    DailyInputs,
    PeriodConfig,
    ResidualConfig,
    build_projection,
    compare_models,
)

HOURLY = CompensationModel.HOURLY_PLUS_COMMISSION
COMMISSION = CompensationModel.COMMISSION_ONLY


@pytest.fixture
def scenario_inputs():
    """8 hours, 20 apps, 53 days, 70% persistency."""
    return (
        DailyInputs(applications_per_day=20, hours_worked=8),
        PeriodConfig(working_days=53),
        ResidualConfig(persistency_rate=70),
    )


class TestBuildProjection:
    """Tests for the composed projection."""

    def test_scenario_a(self, scenario_inputs):
        result = build_projection(HOURLY, *scenario_inputs)

        assert result.model is HOURLY
        assert result.daily.total_pay == 321
        assert result.period.total_applications == 1060
        assert result.period.total_pay == 17013
        assert result.yearly_residuals[0].monthly_amount == 2120
        assert result.yearly_residuals[1].active_customers == 742
        assert result.yearly_residuals[2].active_customers == 519

    def test_scenario_b(self, scenario_inputs):
        result = build_projection(COMMISSION, *scenario_inputs)
        assert result.daily.hourly_pay == 0
        assert result.daily.total_pay == 300
        assert result.period.total_pay == 15900

    def test_cumulative_is_exact_sum(self, scenario_inputs):
        for model in CompensationModel:
            result = build_projection(model, *scenario_inputs)
            assert result.cumulative_total == result.period.total_pay + result.total_residuals

    @pytest.mark.parametrize("apps,hours,days,rate", [
        (0, 0, 1, 0),
        (3, 12.5, 17, 33.3),
        (100, 16, 100, 100),
        (7, 4, 60, 85),
    ])
    def test_cumulative_identity_across_inputs(self, apps, hours, days, rate):
        result = build_projection(
            HOURLY,
            DailyInputs(applications_per_day=apps, hours_worked=hours),
            PeriodConfig(working_days=days),
            ResidualConfig(persistency_rate=rate),
        )
        assert result.cumulative_total == result.period.total_pay + result.total_residuals

    def test_residuals_fed_from_period_applications(self, scenario_inputs):
        daily, _, residual = scenario_inputs
        result = build_projection(HOURLY, daily, PeriodConfig(working_days=10), residual)
        assert result.yearly_residuals[0].active_customers == 200

    def test_defaults(self):
        """Defaults: 53 working days and no residual decay."""
        result = build_projection(COMMISSION, DailyInputs(applications_per_day=1, hours_worked=0))
        assert result.period.total_pay == 15 * 53
        monthly = {y.monthly_amount for y in result.yearly_residuals}
        assert monthly == {2 * 53}

    def test_negative_daily_inputs_are_clamped(self):
        daily = DailyInputs(applications_per_day=-5, hours_worked=-1)
        assert daily.applications_per_day == 0
        assert daily.hours_worked == 0
        result = build_projection(HOURLY, daily)
        assert result.cumulative_total == 0

    def test_period_config_rejects_zero_days(self):
        with pytest.raises(ValueError):
            PeriodConfig(working_days=0)

    def test_residual_config_range(self):
        with pytest.raises(ValueError):
            ResidualConfig(persistency_rate=101)


class TestCompareModels:
    """Tests for side-by-side comparison."""

    def test_scenario_comparison(self, scenario_inputs):
        comparison = compare_models(*scenario_inputs)

        assert comparison.hourly_plus_commission.model is HOURLY
        assert comparison.commission_only.model is COMMISSION
        assert comparison.daily_pay_difference == 21
        assert comparison.period_pay_difference == 21 * 53
        assert comparison.monthly_residual_difference == 0
        assert comparison.better_model is HOURLY

    def test_commission_only_wins_with_no_hours(self):
        comparison = compare_models(DailyInputs(applications_per_day=20, hours_worked=0))
        assert comparison.better_model is COMMISSION
        # 300 vs 225
        assert comparison.daily_pay_difference == 75

    def test_tie_prefers_hourly(self):
        # 5 apps: hourly model pays 12 * 6.25 = 75, commission model pays 15 * 5 = 75
        comparison = compare_models(DailyInputs(applications_per_day=5, hours_worked=6.25))
        assert comparison.daily_pay_difference == 0
        assert comparison.better_model is HOURLY

    def test_residuals_identical_across_models(self, scenario_inputs):
        comparison = compare_models(*scenario_inputs)
        assert (
            comparison.hourly_plus_commission.total_residuals
            == comparison.commission_only.total_residuals
        )
