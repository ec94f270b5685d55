"""Tests for the MCP tool functions.

Tools are called directly (every argument passed explicitly so no
pydantic Field defaults leak through).
"""

import asyncio

import pytest

pytest.importorskip("mcp")

from oepcalc.mcp import server


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("OEP_CALC_CONFIG_PATH", str(tmp_path))


def test_project_earnings_scenario_a():
    data = asyncio.run(server.project_earnings(
        compensation_model="Hourly+Commission",
        applications_per_day=20,
        hours_worked=8,
        working_days=53,
        persistency_rate=70,
        preview_months=0,
    ))
    assert "error" not in data, data
    assert data["period"]["total_pay"] == 17013
    assert data["inputs"]["working_days"] == 53
    assert "monthly_preview" not in data


def test_project_earnings_form_style_strings():
    """Garbage working days falls back to 53, apps parse leading digits."""
    data = asyncio.run(server.project_earnings(
        compensation_model="CommissionOnly",
        applications_per_day="20 apps",
        hours_worked="",
        working_days="abc",
        persistency_rate=None,
        preview_months=2,
    ))
    assert data["period"]["total_pay"] == 15900
    assert data["inputs"]["hours_worked"] == 8
    assert len(data["monthly_preview"]) == 2


def test_project_earnings_unknown_model_returns_error():
    data = asyncio.run(server.project_earnings(
        compensation_model="Salary",
        applications_per_day=1,
        hours_worked=1,
        working_days=1,
        persistency_rate=70,
        preview_months=0,
    ))
    assert "error" in data


def test_compare_compensation_models():
    data = asyncio.run(server.compare_compensation_models(
        applications_per_day=20,
        hours_worked=8,
        working_days=53,
        persistency_rate=70,
    ))
    assert data["period_pay_difference"] == 21 * 53
    assert data["monthly_residual_difference"] == 0


def test_project_residual_income():
    data = asyncio.run(server.project_residual_income(total_applications=1060, persistency_rate=0))
    assert [y["active_customers"] for y in data["yearly_residuals"]] == [1060, 0, 0, 0, 0]
