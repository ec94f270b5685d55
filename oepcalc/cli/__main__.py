"""OEP Calc CLI - Command-line interface for agent earnings projections."""

import json
import logging

import click
from rich.console import Console

from oepcalc import __version__
from oepcalc.sdk import (
    CompensationModel,
    DailyInputs,
    PeriodConfig,
    ProfileDefaults,
    ProfileValidationError,
    ResidualConfig,
    build_projection,
    compare_models,
    get_output_format,
    high_volume_warning,
    load_defaults,
    preview_monthly_residuals,
    project_residuals,
)

from .profile_commands import profile as profile_group
from .settings_commands import settings as settings_group
from .renderers.projection_renderer import (
    render_comparison,
    render_projection,
    render_schedule,
    render_warnings,
)

MODEL_CHOICES = {
    "hourly": CompensationModel.HOURLY_PLUS_COMMISSION,
    "commission": CompensationModel.COMMISSION_ONLY,
}


@click.group()
@click.version_option(version=__version__, prog_name="oep-calc")
@click.option("--debug", is_flag=True, help="Log engine calculations to stderr.")
def cli(debug):
    """OEP Calc - Earnings projections for open enrollment agents.

    Projects daily pay, total Open Enrollment Period pay, and five years
    of residual income under Hourly + Commission or Commission Only.

    Inputs not given on the command line are taken from (in order):

    \b
    1. profile.yaml 'defaults' section
    2. Built-in defaults (20 apps/day, 8 hours, 53 days, 70% persistency)

    Run 'oep-calc profile show' to see the active defaults.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


cli.add_command(profile_group)
cli.add_command(settings_group)


def _load_defaults() -> ProfileDefaults:
    try:
        return load_defaults()
    except ProfileValidationError as e:
        raise click.ClickException(str(e))


def _resolve_format(output_format):
    return output_format or get_output_format()


def _format_day(d) -> str:
    return f"{d:%b} {d.day}, {d.year}"


def _echo_json(payload: dict) -> None:
    click.echo(json.dumps(payload, indent=2))


def activity_options(func):
    """Options shared by commands that take daily activity."""
    func = click.option("--format", "output_format", type=click.Choice(["text", "json"]),
                        default=None, help="Output format (default: settings output_format or text)")(func)
    func = click.option("--persistency", "-p", type=click.FloatRange(0, 100), default=None,
                        help="Percent of customers retained each year (0-100, default 70)")(func)
    func = click.option("--days", "-d", type=click.IntRange(1, 100), default=None,
                        help="OEP working days (1-100, default 53)")(func)
    func = click.option("--hours", type=click.FloatRange(0, 16), default=None,
                        help="Hours worked per day (0-16, default 8)")(func)
    func = click.option("--apps", "-a", type=click.IntRange(0, 100), default=None,
                        help="Approved applications per day (0-100, default 20)")(func)
    return func


def _resolve_inputs(defaults: ProfileDefaults, apps, hours, days, persistency):
    daily = DailyInputs(
        applications_per_day=defaults.applications_per_day if apps is None else apps,
        hours_worked=defaults.hours_worked if hours is None else hours,
    )
    period = PeriodConfig(working_days=defaults.working_days if days is None else days)
    residual = ResidualConfig(
        persistency_rate=defaults.persistency_rate if persistency is None else persistency
    )
    return daily, period, residual


@cli.command("project")
@click.option("--model", "-m", type=click.Choice(sorted(MODEL_CHOICES), case_sensitive=False),
              default=None, help="Compensation model (default: profile or hourly)")
@activity_options
@click.option("--preview", is_flag=True, help="Also show a month-by-month residual preview")
@click.option("--preview-months", type=click.IntRange(1, 24), default=None,
              help="Months to preview (1-24, default: profile preview_months). Implies --preview.")
def project(model, apps, hours, days, persistency, output_format, preview, preview_months):
    """Project earnings for one compensation model.

    Examples:
      oep-calc project
      oep-calc project --model commission --apps 25
      oep-calc project --hours 6.5 --days 40 --format json
    """
    defaults = _load_defaults()
    comp_model = MODEL_CHOICES[model.lower()] if model else defaults.compensation_model
    daily, period, residual = _resolve_inputs(defaults, apps, hours, days, persistency)

    result = build_projection(comp_model, daily, period, residual)
    monthly = None
    if preview or preview_months:
        months = preview_months or defaults.preview_months
        monthly = preview_monthly_residuals(result, months, start=defaults.oep.residual_start)

    warning = high_volume_warning(daily.applications_per_day)

    if _resolve_format(output_format) == "json":
        payload = result.model_dump(mode="json")
        if monthly:
            payload["monthly_preview"] = [m.model_dump(mode="json") for m in monthly]
        payload["warnings"] = [warning] if warning else []
        _echo_json(payload)
        return

    console = Console()
    if warning:
        render_warnings(console, [warning])
    render_projection(console, result, period.working_days, residual.persistency_rate, monthly)
    click.echo(
        f"Assumes {period.working_days} OEP working days "
        f"({_format_day(defaults.oep.start)} - {_format_day(defaults.oep.end)})."
    )


@cli.command("compare")
@activity_options
def compare(apps, hours, days, persistency, output_format):
    """Compare Hourly + Commission against Commission Only.

    Both models use the same daily activity; Commission Only ignores hours.
    """
    defaults = _load_defaults()
    daily, period, residual = _resolve_inputs(defaults, apps, hours, days, persistency)

    comparison = compare_models(daily, period, residual)

    if _resolve_format(output_format) == "json":
        _echo_json(comparison.model_dump(mode="json"))
        return

    console = Console()
    warning = high_volume_warning(daily.applications_per_day)
    if warning:
        render_warnings(console, [warning])
    render_comparison(console, comparison)


@cli.command("residuals")
@click.argument("total_apps", type=click.FloatRange(min=0))
@click.option("--persistency", "-p", type=click.FloatRange(0, 100), default=None,
              help="Percent of customers retained each year (0-100, default 70)")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default=None)
def residuals(total_apps, persistency, output_format):
    """Project five years of residuals for TOTAL_APPS enrolled customers.

    Each active customer pays $2/month. Retention is applied at each
    annual renewal after the first year, compounding.

    Examples:
      oep-calc residuals 1060
      oep-calc residuals 1060 --persistency 85
    """
    defaults = _load_defaults()
    rate = defaults.persistency_rate if persistency is None else persistency

    schedule = project_residuals(total_apps, rate)

    if _resolve_format(output_format) == "json":
        _echo_json(schedule.model_dump(mode="json"))
        return

    render_schedule(Console(), schedule, rate)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
