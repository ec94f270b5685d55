"""Pydantic schemas for oep-calc inputs and projection results.

All schemas use extra='forbid' to reject unknown fields and frozen=True so
a result, once produced, is never mutated in place. Every recalculation
builds fresh instances.
"""

from datetime import date
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .inputs import clamp_non_negative


# =============================================================================
# Inputs
# =============================================================================


class CompensationModel(str, Enum):
    """Closed set of compensation schemes an agent can be paid under."""

    HOURLY_PLUS_COMMISSION = "Hourly+Commission"
    COMMISSION_ONLY = "CommissionOnly"

    @property
    def label(self) -> str:
        """Human-readable name."""
        if self is CompensationModel.HOURLY_PLUS_COMMISSION:
            return "Hourly + Commission"
        return "Commission Only"


class DailyInputs(BaseModel):
    """One working day's activity.

    Negative and non-numeric values are clamped to zero rather than
    rejected. Hours are not capped here; the 0-16 range is a CLI concern.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    applications_per_day: float = Field(default=20, ge=0, description="Approved applications per day")
    hours_worked: float = Field(default=8, ge=0, description="Hours worked per day")

    @field_validator("applications_per_day", "hours_worked", mode="before")
    @classmethod
    def clamp_to_zero(cls, v):
        return clamp_non_negative(v)


class PeriodConfig(BaseModel):
    """Length of the enrollment period in working days."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    working_days: int = Field(default=53, gt=0, description="Working days in the OEP")


class ResidualConfig(BaseModel):
    """Retention assumption for residual income."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    persistency_rate: float = Field(
        default=100, ge=0, le=100,
        description="Percent of active customers retained at each annual renewal",
    )


# =============================================================================
# Results
# =============================================================================


class DailyPayResult(BaseModel):
    """Single day's earnings breakdown."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hourly_pay: float = Field(..., ge=0, description="Pay from hours worked")
    commission_pay: float = Field(..., ge=0, description="Pay from per-application commission")
    total_pay: float = Field(..., ge=0, description="hourly_pay + commission_pay")

    @model_validator(mode="after")
    def check_total(self) -> "DailyPayResult":
        """Total must be the sum of its parts."""
        if abs(self.total_pay - (self.hourly_pay + self.commission_pay)) > 1e-9:
            raise ValueError(
                f"total_pay {self.total_pay} != hourly_pay {self.hourly_pay} "
                f"+ commission_pay {self.commission_pay}"
            )
        return self


class PeriodResult(BaseModel):
    """Daily results scaled across the enrollment period.

    No sign constraints: a non-positive working day count propagates into
    zero or negative totals.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    total_applications: float = Field(..., description="Applications across the period")
    total_pay: float = Field(..., description="Pay across the period")


class YearlyResidual(BaseModel):
    """One year of residual income."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=1, le=5, description="Residual year (1-based)")
    active_customers: int = Field(..., description="Active customers, rounded for display")
    monthly_amount: float = Field(..., description="Residual paid per month this year")
    year_total: float = Field(..., description="monthly_amount * 12")
    retention_rate_applied: float = Field(
        ..., description="Persistency applied entering this year (100 for year 1)"
    )


class ResidualSchedule(BaseModel):
    """Five-year residual projection."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    yearly_residuals: Tuple[YearlyResidual, ...] = Field(..., min_length=5, max_length=5)
    total_residuals: float = Field(..., description="Sum of yearly totals")


class ProjectionResult(BaseModel):
    """Everything displayed for one compensation model."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    model: CompensationModel
    daily: DailyPayResult
    period: PeriodResult
    yearly_residuals: Tuple[YearlyResidual, ...] = Field(..., min_length=5, max_length=5)
    total_residuals: float
    cumulative_total: float = Field(..., description="period.total_pay + total_residuals")

    @property
    def first_year_monthly_residual(self) -> float:
        """Monthly residual paid during year 1."""
        return self.yearly_residuals[0].monthly_amount


class ModelComparison(BaseModel):
    """Both compensation models evaluated on identical inputs.

    Differences are absolute values. Residuals depend only on applications,
    so the monthly residual difference is always zero.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    hourly_plus_commission: ProjectionResult
    commission_only: ProjectionResult
    daily_pay_difference: float = Field(..., ge=0)
    period_pay_difference: float = Field(..., ge=0)
    monthly_residual_difference: float = Field(..., ge=0)
    better_model: CompensationModel = Field(..., description="Model with the higher OEP pay")


class MonthlyResidual(BaseModel):
    """A single calendar month of residual income."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    month_index: int = Field(..., ge=1, description="1-based month since residuals began")
    label: str = Field(..., description="Calendar month, e.g. 'Feb 2026'")
    month_start: date
    year: int = Field(..., ge=1, le=5, description="Residual year the month falls in")
    active_customers: int
    amount: float


# =============================================================================
# Profile defaults
# =============================================================================


class OepWindow(BaseModel):
    """Calendar window of the enrollment period."""

    model_config = ConfigDict(extra="forbid")

    start: date = Field(default=date(2025, 11, 1))
    end: date = Field(default=date(2026, 1, 15))
    residual_start: date = Field(
        default=date(2026, 2, 1), description="First month residuals are paid"
    )

    @model_validator(mode="after")
    def check_order(self) -> "OepWindow":
        if self.end < self.start:
            raise ValueError(f"oep.end {self.end} is before oep.start {self.start}")
        return self


class ProfileDefaults(BaseModel):
    """Default calculator inputs read from profile.yaml.

    Unlike DailyInputs, profile values are validated strictly so typos in
    the file surface as errors instead of silently becoming zero.
    """

    model_config = ConfigDict(extra="forbid")

    compensation_model: CompensationModel = CompensationModel.HOURLY_PLUS_COMMISSION
    applications_per_day: int = Field(default=20, ge=0, le=100)
    hours_worked: float = Field(default=8, ge=0, le=16)
    working_days: int = Field(default=53, ge=1, le=100)
    persistency_rate: float = Field(default=70, ge=0, le=100)
    preview_months: int = Field(default=12, ge=1, le=24)
    oep: OepWindow = Field(default_factory=OepWindow)
    label: Optional[str] = Field(default=None, description="Free-form profile name")
