"""OEP Calc SDK - Compensation and residual projection engine.

Scope:
- Daily pay under each compensation model (compensation.py)
- OEP period scaling (period.py)
- Five-year residual schedule with compounding retention (residuals.py)
- Cumulative projection and model comparison (projection.py)
- Whole-dollar display formatting (formatting.py)
- Settings and profile defaults (config.py)

Constraints:
- Engine functions are pure: no I/O, no shared state, never raise on
  numeric input (negative or non-numeric values are clamped)
- Results are frozen pydantic models, rebuilt on every call

Usage:
    from oepcalc.sdk import CompensationModel, DailyInputs, build_projection

    result = build_projection(
        CompensationModel.HOURLY_PLUS_COMMISSION,
        DailyInputs(applications_per_day=20, hours_worked=8),
    )
    result.period.total_pay  # 17013.0
"""

from .schemas import (
    CompensationModel,
    DailyInputs,
    DailyPayResult,
    PeriodConfig,
    PeriodResult,
    ResidualConfig,
    YearlyResidual,
    ResidualSchedule,
    ProjectionResult,
    ModelComparison,
    MonthlyResidual,
    OepWindow,
    ProfileDefaults,
)

from .compensation import (
    compute_daily_pay,
    HOURLY_RATE,
    PER_APP_RATE,
    COMMISSION_THRESHOLD,
)

from .period import project_period, DEFAULT_WORKING_DAYS

from .residuals import (
    project_residuals,
    preview_monthly_residuals,
    RESIDUAL_RATE_PER_CUSTOMER,
    RESIDUAL_YEARS,
)

from .projection import build_projection, compare_models

from .formatting import format_currency, format_count, format_percent

from .inputs import (
    clamp_non_negative,
    clamp_range,
    parse_int_or_default,
    parse_float_or_default,
    high_volume_warning,
    HIGH_VOLUME_THRESHOLD,
)

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    get_output_format,
    get_profile_path,
    load_profile,
    save_profile,
    set_profile_value,
    default_profile,
    validate_profile,
    load_defaults,
    ProfileNotFoundError,
    ProfileValidationError,
)

__all__ = [
    # Schemas
    "CompensationModel",
    "DailyInputs",
    "DailyPayResult",
    "PeriodConfig",
    "PeriodResult",
    "ResidualConfig",
    "YearlyResidual",
    "ResidualSchedule",
    "ProjectionResult",
    "ModelComparison",
    "MonthlyResidual",
    "OepWindow",
    "ProfileDefaults",
    # Engine
    "compute_daily_pay",
    "HOURLY_RATE",
    "PER_APP_RATE",
    "COMMISSION_THRESHOLD",
    "project_period",
    "DEFAULT_WORKING_DAYS",
    "project_residuals",
    "preview_monthly_residuals",
    "RESIDUAL_RATE_PER_CUSTOMER",
    "RESIDUAL_YEARS",
    "build_projection",
    "compare_models",
    # Formatting
    "format_currency",
    "format_count",
    "format_percent",
    # Input helpers
    "clamp_non_negative",
    "clamp_range",
    "parse_int_or_default",
    "parse_float_or_default",
    "high_volume_warning",
    "HIGH_VOLUME_THRESHOLD",
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "get_output_format",
    "get_profile_path",
    "load_profile",
    "save_profile",
    "set_profile_value",
    "default_profile",
    "validate_profile",
    "load_defaults",
    "ProfileNotFoundError",
    "ProfileValidationError",
]
