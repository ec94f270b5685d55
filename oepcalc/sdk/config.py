"""Configuration management for OEP Calc.

Configuration is split into two files:

1. settings.json - Machine-specific, ephemeral settings
   - profile: path to profile.yaml (optional, if not colocated)
   - output_format: "text" or "json" for CLI output

2. profile.yaml - The agent's calculator defaults
   - defaults: compensation model, daily activity, working days,
     persistency rate, OEP calendar window

Config directory resolution:
1. OEP_CALC_CONFIG_PATH environment variable (if set)
2. ~/.config/oep-calc/ (XDG_CONFIG_HOME fallback)

Profile resolution:
1. settings.json "profile" key (if set via CLI)
2. profile.yaml in same config directory
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from .schemas import ProfileDefaults

logger = logging.getLogger(__name__)

APP_NAME = "oep-calc"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"
OUTPUT_FORMATS = ("text", "json")


class ProfileNotFoundError(Exception):
    """Raised when no profile is found."""
    pass


class ProfileValidationError(Exception):
    """Raised when profile.yaml holds invalid calculator defaults."""

    def __init__(self, path: Path, errors: list):
        self.path = path
        self.errors = errors
        error_str = "\n  ! ".join(errors)
        super().__init__(
            f"Profile has validation errors:\n\n"
            f"  ! {error_str}\n\n"
            f"Profile: {path}\n"
            f"Fix errors and retry, or use: oep-calc profile show"
        )


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. OEP_CALC_CONFIG_PATH environment variable
    2. ~/.config/oep-calc/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("OEP_CALC_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def get_output_format() -> str:
    """Preferred CLI output format, "text" unless settings say otherwise."""
    fmt = get_setting("output_format", "text")
    if fmt not in OUTPUT_FORMATS:
        logger.warning(f"Ignoring unknown output_format setting: {fmt}")
        return "text"
    return fmt


def get_profile_path(require_exists: bool = False) -> Path:
    """Get the path to the profile.yaml file.

    Resolution order:
    1. settings.json "profile" key (if set)
    2. profile.yaml in config directory

    Args:
        require_exists: If True, raises ProfileNotFoundError if not found

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    custom_profile = load_settings().get("profile")
    if custom_profile:
        profile_path = Path(custom_profile)
        if require_exists and not profile_path.exists():
            raise ProfileNotFoundError(
                f"Profile not found at configured path: {profile_path}\n\n"
                f"Update with: oep-calc profile use /path/to/profile.yaml"
            )
        return profile_path

    profile_path = get_config_dir() / PROFILE_FILENAME
    if require_exists and not profile_path.exists():
        raise ProfileNotFoundError(
            f"No profile found. Checked:\n"
            f"  1. settings.json 'profile' key (not set)\n"
            f"  2. {profile_path} (not found)\n\n"
            f"Create a profile with: oep-calc profile init"
        )

    return profile_path


def load_profile(require_exists: bool = True) -> dict:
    """Load the profile from profile.yaml.

    Args:
        require_exists: If True, raises ProfileNotFoundError if not found

    Returns:
        Profile dictionary (empty dict if not required and not found)
    """
    profile_path = get_profile_path(require_exists=require_exists)

    if not profile_path.exists():
        return {}

    with open(profile_path, "r") as f:
        return yaml.safe_load(f) or {}


def save_profile(profile: dict, path: Optional[Path] = None) -> Path:
    """Save the profile to profile.yaml.

    Args:
        profile: Profile dictionary to save
        path: Optional custom path (uses default if not specified)

    Returns:
        Path to the saved profile file
    """
    if path is None:
        path = get_profile_path(require_exists=False)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile, f, default_flow_style=False, sort_keys=False)

    return path


def set_profile_value(key: str, value: Any) -> Path:
    """Set a profile value by dot-notation key.

    Intermediate mappings are created as needed.

    Returns:
        Path to the saved profile file
    """
    profile = load_profile(require_exists=False)

    parts = key.split(".")
    current = profile

    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            current[part] = {}
        current = current[part]

    current[parts[-1]] = value

    return save_profile(profile)


def default_profile() -> dict:
    """Profile contents written by 'oep-calc profile init'."""
    return {"defaults": ProfileDefaults().model_dump(mode="json", exclude_none=True)}


def _format_validation_error(err: ValidationError) -> list:
    errors = []
    for detail in err.errors():
        loc = ".".join(str(p) for p in detail["loc"])
        errors.append(f"defaults.{loc}: {detail['msg']}" if loc else detail["msg"])
    return errors


def validate_profile(profile: Optional[dict] = None) -> ProfileDefaults:
    """Validate the 'defaults' section of a profile.

    Args:
        profile: Profile dict to validate (loads the active profile if None)

    Returns:
        ProfileDefaults with every unset field filled from built-in defaults

    Raises:
        ProfileValidationError: If the defaults section is malformed
    """
    if profile is None:
        profile = load_profile(require_exists=False)

    path = get_profile_path(require_exists=False)

    if not isinstance(profile, dict):
        raise ProfileValidationError(path, [f"profile must be a mapping, got {type(profile).__name__}"])

    defaults = profile.get("defaults") or {}
    if not isinstance(defaults, dict):
        raise ProfileValidationError(path, [f"defaults must be a mapping, got {type(defaults).__name__}"])

    try:
        return ProfileDefaults.model_validate(defaults)
    except ValidationError as e:
        raise ProfileValidationError(path, _format_validation_error(e)) from e


def load_defaults() -> ProfileDefaults:
    """Load validated calculator defaults from the active profile.

    A missing profile is not an error: built-in defaults are returned.
    """
    profile_path = get_profile_path(require_exists=False)
    if not profile_path.exists():
        logger.debug(f"No profile at {profile_path}, using built-in defaults")
        return ProfileDefaults()

    return validate_profile(load_profile(require_exists=False))
