"""OEP Calc MCP Server - FastMCP tools for earnings projections."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from oepcalc.sdk import (
    CompensationModel,
    DailyInputs,
    PeriodConfig,
    ResidualConfig,
    build_projection,
    clamp_range,
    compare_models,
    high_volume_warning,
    load_defaults,
    parse_float_or_default,
    parse_int_or_default,
    preview_monthly_residuals,
    project_residuals,
)

logger = logging.getLogger(__name__)

mcp = FastMCP("oep-calc")


def _resolve_inputs(applications_per_day, hours_worked, working_days, persistency_rate):
    """Apply form-style parsing and fall back to profile defaults.

    Values arrive as whatever the client sends (numbers or strings);
    unparseable entries fall back to defaults rather than failing.
    """
    defaults = load_defaults()
    if applications_per_day is None:
        apps = defaults.applications_per_day
    else:
        apps = parse_int_or_default(applications_per_day, 0)
    hours = parse_float_or_default(hours_worked, defaults.hours_worked)
    days = parse_int_or_default(working_days, defaults.working_days)
    rate = parse_float_or_default(persistency_rate, defaults.persistency_rate)

    daily = DailyInputs(applications_per_day=clamp_range(apps, 0, 100), hours_worked=clamp_range(hours, 0, 16))
    period = PeriodConfig(working_days=int(clamp_range(days, 1, 100)))
    residual = ResidualConfig(persistency_rate=clamp_range(rate, 0, 100))
    return defaults, daily, period, residual


# --- Tools ---

@mcp.tool()
async def project_earnings(
    compensation_model: str = Field(
        default="Hourly+Commission",
        description="'Hourly+Commission' ($12/hr + $15/app beyond 5 per day) or 'CommissionOnly' ($15/app)",
    ),
    applications_per_day: int | str | None = Field(default=None, description="Approved applications per day (0-100)"),
    hours_worked: float | str | None = Field(default=None, description="Hours worked per day (0-16)"),
    working_days: int | str | None = Field(default=None, description="OEP working days (1-100, default 53)"),
    persistency_rate: float | str | None = Field(default=None, description="Percent of customers retained each year"),
    preview_months: int = Field(default=0, description="Months of residual preview to include (0 for none)"),
) -> dict[str, Any]:
    """Project daily pay, OEP pay, and five years of residual income for one compensation model."""
    try:
        defaults, daily, period, residual = _resolve_inputs(
            applications_per_day, hours_worked, working_days, persistency_rate
        )
        result = build_projection(CompensationModel(compensation_model), daily, period, residual)

        payload = result.model_dump(mode="json")
        payload["inputs"] = {
            **daily.model_dump(mode="json"),
            **period.model_dump(mode="json"),
            **residual.model_dump(mode="json"),
        }
        if preview_months:
            preview = preview_monthly_residuals(result, preview_months, start=defaults.oep.residual_start)
            payload["monthly_preview"] = [m.model_dump(mode="json") for m in preview]
        warning = high_volume_warning(daily.applications_per_day)
        payload["warnings"] = [warning] if warning else []
        return payload

    except Exception as e:
        logger.error(f"Error projecting earnings: {e}")
        return {"error": str(e)}


@mcp.tool()
async def compare_compensation_models(
    applications_per_day: int | str | None = Field(default=None, description="Approved applications per day (0-100)"),
    hours_worked: float | str | None = Field(default=None, description="Hours worked per day (0-16)"),
    working_days: int | str | None = Field(default=None, description="OEP working days (1-100, default 53)"),
    persistency_rate: float | str | None = Field(default=None, description="Percent of customers retained each year"),
) -> dict[str, Any]:
    """Compare Hourly + Commission against Commission Only on the same daily activity."""
    try:
        _, daily, period, residual = _resolve_inputs(
            applications_per_day, hours_worked, working_days, persistency_rate
        )
        return compare_models(daily, period, residual).model_dump(mode="json")

    except Exception as e:
        logger.error(f"Error comparing models: {e}")
        return {"error": str(e)}


@mcp.tool()
async def project_residual_income(
    total_applications: float = Field(description="Customers enrolled during the OEP"),
    persistency_rate: float = Field(default=70, description="Percent of customers retained each year (0-100)"),
) -> dict[str, Any]:
    """Project five years of $2/month residuals with compounding annual retention."""
    try:
        return project_residuals(total_applications, persistency_rate).model_dump(mode="json")
    except Exception as e:
        logger.error(f"Error projecting residuals: {e}")
        return {"error": str(e)}


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
