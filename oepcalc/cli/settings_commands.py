"""Settings CLI commands for OEP Calc.

Manages settings.json - output format, profile path.
"""

import click

from oepcalc.sdk import (
    load_settings,
    save_settings,
    set_setting,
    get_settings_path,
    get_profile_path,
)
from oepcalc.sdk.config import OUTPUT_FORMATS


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - output_format: default CLI output, "text" or "json"
    - profile: path to profile.yaml (set via 'profile use')
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective paths:")
    click.echo(f"  profile: {get_profile_path()}")


@settings.command("output-format")
@click.argument("fmt", required=False, type=click.Choice(OUTPUT_FORMATS))
@click.option("--clear", is_flag=True, help="Clear output_format, revert to text")
def settings_output_format(fmt, clear):
    """Set or clear the default output format.

    Examples:
        oep-calc settings output-format json
        oep-calc settings output-format --clear
    """
    if clear:
        current = load_settings()
        if "output_format" in current:
            del current["output_format"]
            save_settings(current)
            click.echo("Cleared output_format setting.")
        else:
            click.echo("output_format was not set.")
        return

    if not fmt:
        click.echo(f"output_format: {load_settings().get('output_format', 'text')}")
        return

    set_setting("output_format", fmt)
    click.echo(f"Set output_format: {fmt}")
    click.echo(f"Saved to: {get_settings_path()}")
