"""Profile CLI commands for OEP Calc.

Manages calculator defaults stored in profile.yaml.
"""

from pathlib import Path

import click
import yaml

from oepcalc.sdk import (
    default_profile,
    get_profile_path,
    load_profile,
    parse_float_or_default,
    parse_int_or_default,
    save_profile,
    set_profile_value,
    set_setting,
    validate_profile,
    ProfileValidationError,
)

# Value a form field takes when the input is empty or garbage. Integer
# keys treat a parsed 0 the same way, except applications where 0 is 0.
INT_FALLBACKS = {"applications_per_day": 0, "working_days": 53, "preview_months": 12}
FLOAT_FALLBACKS = {"hours_worked": 0.0, "persistency_rate": 0.0}


def _coerce_value(key: str, raw: str):
    """Convert a command-line string to the type the defaults key expects.

    Numbers are parsed the way the calculator's form fields parse them:
    applications fall back to 0, working days to 53 and preview months
    to 12. Unparseable hours and persistency become 0.
    """
    field = key.split(".")[-1]
    if field in INT_FALLBACKS:
        return parse_int_or_default(raw, INT_FALLBACKS[field])
    if field in FLOAT_FALLBACKS:
        return parse_float_or_default(raw, FLOAT_FALLBACKS[field])
    return raw


@click.group()
def profile():
    """Manage the calculator profile (profile.yaml).

    The profile's 'defaults' section supplies inputs the CLI
    uses when options are omitted.
    """
    pass


@profile.command("show")
def profile_show():
    """Show the active profile and the effective defaults."""
    path = get_profile_path()
    click.echo(f"Profile: {path}")
    click.echo(f"File exists: {path.exists()}")
    click.echo()

    try:
        defaults = validate_profile(load_profile(require_exists=False))
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    click.echo("Effective defaults:")
    click.echo(yaml.dump(defaults.model_dump(mode="json", exclude_none=True),
                         default_flow_style=False, sort_keys=False).rstrip())


@profile.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing profile.")
def profile_init(force):
    """Create profile.yaml populated with the built-in defaults."""
    path = get_profile_path()
    if path.exists() and not force:
        raise click.ClickException(f"Profile already exists: {path}\nUse --force to overwrite.")

    saved = save_profile(default_profile(), path)
    click.echo(f"Created profile: {saved}")


@profile.command("set")
@click.argument("key")
@click.argument("value")
def profile_set(key, value):
    """Set a profile value by dot-notation KEY.

    Examples:
        oep-calc profile set defaults.working_days 60
        oep-calc profile set defaults.compensation_model CommissionOnly
    """
    if not key.startswith("defaults."):
        key = f"defaults.{key}"

    candidate = load_profile(require_exists=False)
    node = candidate
    parts = key.split(".")
    for part in parts[:-1]:
        if not isinstance(node.get(part), dict):
            node[part] = {}
        node = node[part]
    node[parts[-1]] = _coerce_value(key, value)

    try:
        validate_profile(candidate)
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    path = set_profile_value(key, node[parts[-1]])
    click.echo(f"Set {key}: {node[parts[-1]]}")
    click.echo(f"Saved to: {path}")


@profile.command("use")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def profile_use(path):
    """Point settings.json at a profile.yaml stored elsewhere."""
    profile_path = Path(path).expanduser().resolve()

    try:
        with open(profile_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise click.ClickException(f"Invalid YAML in {profile_path}: {e}")

    try:
        validate_profile(data)
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    set_setting("profile", str(profile_path))
    click.echo(f"Using profile: {profile_path}")
