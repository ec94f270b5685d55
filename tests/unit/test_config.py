"""Tests for settings and profile configuration.

Uses isolated directories via tmp_path and OEP_CALC_CONFIG_PATH
to avoid touching real user configuration.
"""

import json
from datetime import date

import pytest
import yaml

from oepcalc.sdk import (
    CompensationModel,
    ProfileNotFoundError,
    ProfileValidationError,
    default_profile,
    get_config_dir,
    get_output_format,
    get_profile_path,
    load_defaults,
    load_profile,
    load_settings,
    set_profile_value,
    set_setting,
    validate_profile,
)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the SDK at an empty config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("OEP_CALC_CONFIG_PATH", str(config_dir))
    return config_dir


def write_profile(config_dir, profile_data: dict):
    """Write profile.yaml to config directory."""
    (config_dir / "profile.yaml").write_text(yaml.dump(profile_data))


class TestPaths:

    def test_env_var_wins(self, isolated_config):
        assert get_config_dir() == isolated_config

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("OEP_CALC_CONFIG_PATH", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / "oep-calc"

    def test_custom_profile_path_from_settings(self, isolated_config, tmp_path):
        custom = tmp_path / "elsewhere.yaml"
        set_setting("profile", str(custom))
        assert get_profile_path() == custom

    def test_missing_profile_required(self, isolated_config):
        with pytest.raises(ProfileNotFoundError):
            load_profile(require_exists=True)


class TestSettings:

    def test_settings_round_trip(self, isolated_config):
        set_setting("output_format", "json")
        assert load_settings() == {"output_format": "json"}
        stored = json.loads((isolated_config / "settings.json").read_text())
        assert stored["output_format"] == "json"

    def test_output_format_default(self, isolated_config):
        assert get_output_format() == "text"

    def test_unknown_output_format_ignored(self, isolated_config):
        set_setting("output_format", "xml")
        assert get_output_format() == "text"


class TestProfileDefaults:

    def test_no_profile_uses_builtin(self, isolated_config):
        defaults = load_defaults()
        assert defaults.compensation_model is CompensationModel.HOURLY_PLUS_COMMISSION
        assert defaults.applications_per_day == 20
        assert defaults.hours_worked == 8
        assert defaults.working_days == 53
        assert defaults.persistency_rate == 70
        assert defaults.preview_months == 12
        assert defaults.oep.start == date(2025, 11, 1)
        assert defaults.oep.end == date(2026, 1, 15)
        assert defaults.oep.residual_start == date(2026, 2, 1)

    def test_partial_profile_fills_rest(self, isolated_config):
        write_profile(isolated_config, {"defaults": {"working_days": 60, "compensation_model": "CommissionOnly"}})
        defaults = load_defaults()
        assert defaults.working_days == 60
        assert defaults.compensation_model is CompensationModel.COMMISSION_ONLY
        assert defaults.applications_per_day == 20

    def test_default_profile_validates(self, isolated_config):
        write_profile(isolated_config, default_profile())
        assert load_defaults().working_days == 53

    def test_unknown_key_rejected(self, isolated_config):
        write_profile(isolated_config, {"defaults": {"workng_days": 60}})
        with pytest.raises(ProfileValidationError) as exc:
            load_defaults()
        assert "workng_days" in str(exc.value)

    @pytest.mark.parametrize("key,value", [
        ("working_days", 0),
        ("working_days", 101),
        ("persistency_rate", 120),
        ("hours_worked", 17),
        ("applications_per_day", -1),
        ("compensation_model", "Salary"),
    ])
    def test_out_of_range_rejected(self, key, value):
        with pytest.raises(ProfileValidationError):
            validate_profile({"defaults": {key: value}})

    def test_oep_window_order(self):
        with pytest.raises(ProfileValidationError):
            validate_profile({"defaults": {"oep": {"start": "2026-01-15", "end": "2025-11-01"}}})

    def test_defaults_not_mapping(self):
        with pytest.raises(ProfileValidationError):
            validate_profile({"defaults": [1, 2]})


class TestProfileValues:

    def test_set_nested(self, isolated_config):
        set_profile_value("defaults.working_days", 45)
        assert load_defaults().working_days == 45

    def test_set_keeps_other_keys(self, isolated_config):
        set_profile_value("defaults.working_days", 45)
        set_profile_value("defaults.persistency_rate", 80)
        defaults = load_defaults()
        assert defaults.working_days == 45
        assert defaults.persistency_rate == 80
