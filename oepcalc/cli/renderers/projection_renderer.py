"""Rich renderer for earnings projections.

Transforms SDK projection results into formatted Rich tables.
"""

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from oepcalc.sdk import (
    CompensationModel,
    ModelComparison,
    MonthlyResidual,
    ProjectionResult,
    ResidualSchedule,
    format_count,
    format_currency,
    format_percent,
)


def render_warnings(console: Console, warnings: Sequence[str]) -> None:
    """Render warnings as yellow note panels."""
    for warning in warnings:
        console.print(Panel(
            f"[yellow]{warning}[/yellow]",
            title="Note",
            border_style="yellow"
        ))


def render_projection(
    console: Console,
    result: ProjectionResult,
    working_days: int,
    persistency_rate: float,
    preview: Optional[Sequence[MonthlyResidual]] = None,
) -> None:
    """Render a single-model projection.

    Args:
        console: Rich Console instance
        result: SDK output from build_projection()
        working_days: Working days used for the period
        persistency_rate: Persistency used for residuals
        preview: Optional monthly residual preview
    """
    _render_summary(console, result, working_days)
    render_residual_table(console, result.yearly_residuals, result.total_residuals, persistency_rate)
    if preview:
        render_monthly_preview(console, preview)
    _render_totals(console, result)


def _render_summary(console: Console, result: ProjectionResult, working_days: int) -> None:
    table = Table(title=f"{result.model.label}", box=box.SIMPLE_HEAVY)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_column("Detail", style="dim")

    if result.model is CompensationModel.HOURLY_PLUS_COMMISSION:
        daily_detail = (
            f"Hourly: {format_currency(result.daily.hourly_pay)} | "
            f"Commission: {format_currency(result.daily.commission_pay)}"
        )
    else:
        daily_detail = "Pure commission"

    table.add_row("Daily Pay", format_currency(result.daily.total_pay), daily_detail)
    table.add_row("Total OEP Pay", format_currency(result.period.total_pay), f"{working_days} working days")
    table.add_row("Total Approved Apps", format_count(result.period.total_applications), "During OEP")
    table.add_row(
        "Year 1 Monthly Residual",
        format_currency(result.first_year_monthly_residual),
        "per month",
    )

    console.print(table)


def render_residual_table(
    console: Console,
    yearly_residuals,
    total_residuals: float,
    persistency_rate: float,
) -> None:
    """Render the five-year residual schedule."""
    table = Table(
        title=f"5-Year Residuals ({format_percent(persistency_rate)} retention)",
        box=box.SIMPLE,
    )
    table.add_column("Year", justify="right")
    table.add_column("Retention", justify="right")
    table.add_column("Active Customers", justify="right")
    table.add_column("Monthly", justify="right")
    table.add_column("Year Total", justify="right")

    for y in yearly_residuals:
        table.add_row(
            str(y.year),
            format_percent(y.retention_rate_applied),
            format_count(y.active_customers),
            format_currency(y.monthly_amount),
            format_currency(y.year_total),
        )

    table.add_section()
    table.add_row("Total", "", "", "", f"[bold green]{format_currency(total_residuals)}[/bold green]")
    console.print(table)


def render_schedule(console: Console, schedule: ResidualSchedule, persistency_rate: float) -> None:
    """Render a standalone residual schedule."""
    render_residual_table(console, schedule.yearly_residuals, schedule.total_residuals, persistency_rate)


def render_monthly_preview(console: Console, preview: Sequence[MonthlyResidual]) -> None:
    """Render the month-by-month residual preview."""
    table = Table(title="Residual Preview", box=box.SIMPLE)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Month")
    table.add_column("Active Customers", justify="right")
    table.add_column("Residual", justify="right")

    for month in preview:
        table.add_row(
            str(month.month_index),
            month.label,
            format_count(month.active_customers),
            format_currency(month.amount),
        )

    console.print(table)


def _render_totals(console: Console, result: ProjectionResult) -> None:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key")
    table.add_column("value", justify="right")
    table.add_row("OEP Earnings", format_currency(result.period.total_pay))
    table.add_row("Residuals (60 months)", format_currency(result.total_residuals))
    table.add_row("[bold]Total Projected[/bold]", f"[bold]{format_currency(result.cumulative_total)}[/bold]")

    console.print(Panel(table, title="Total Earnings Projection", border_style="green"))


def render_comparison(console: Console, comparison: ModelComparison) -> None:
    """Render both models side by side with differences.

    The difference column is green when Hourly + Commission is ahead and
    red when Commission Only is ahead.
    """
    hourly = comparison.hourly_plus_commission
    commission = comparison.commission_only

    table = Table(title="Side-by-Side Analysis", box=box.SIMPLE_HEAVY)
    table.add_column("Metric")
    table.add_column(CompensationModel.HOURLY_PLUS_COMMISSION.label, justify="right")
    table.add_column(CompensationModel.COMMISSION_ONLY.label, justify="right")
    table.add_column("Difference", justify="right")

    def diff_cell(a: float, b: float, amount: float) -> str:
        color = "green" if a > b else "red"
        return f"[{color}]{format_currency(amount)}[/{color}]"

    table.add_row(
        "Daily Pay",
        format_currency(hourly.daily.total_pay),
        format_currency(commission.daily.total_pay),
        diff_cell(hourly.daily.total_pay, commission.daily.total_pay, comparison.daily_pay_difference),
    )
    table.add_row(
        "Total OEP Pay",
        format_currency(hourly.period.total_pay),
        format_currency(commission.period.total_pay),
        diff_cell(hourly.period.total_pay, commission.period.total_pay, comparison.period_pay_difference),
    )
    table.add_row(
        "Monthly Residual",
        format_currency(hourly.first_year_monthly_residual),
        format_currency(commission.first_year_monthly_residual),
        "[dim]Same[/dim]" if comparison.monthly_residual_difference == 0
        else format_currency(comparison.monthly_residual_difference),
    )
    table.add_row(
        "5-Year Residuals",
        format_currency(hourly.total_residuals),
        format_currency(commission.total_residuals),
        "",
    )
    table.add_row(
        "Total Projected",
        format_currency(hourly.cumulative_total),
        format_currency(commission.cumulative_total),
        "",
    )

    console.print(table)
    console.print(f"Higher OEP pay: [bold]{comparison.better_model.label}[/bold]")
