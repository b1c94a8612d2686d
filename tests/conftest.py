"""Shared test fixtures for the ROI estimator test suite."""

import pytest

from roi_estimator.engine.calculator import ROIEngine
from roi_estimator.models.inputs import Assumptions, OrgProfile


@pytest.fixture
def engine() -> ROIEngine:
    return ROIEngine()


@pytest.fixture
def default_assumptions() -> Assumptions:
    """Literature defaults: $70/reset, 3 resets, $50 wage, $60 IT rate, $4.81M breach, 80%."""
    return Assumptions()


@pytest.fixture
def mid_market_profile() -> OrgProfile:
    """500 employees, $100K premium: the worked reference scenario."""
    return OrgProfile(employee_count=500, device_count=600, annual_insurance_premium=100_000)


@pytest.fixture
def zero_employee_profile() -> OrgProfile:
    return OrgProfile(employee_count=0, device_count=0, annual_insurance_premium=100_000)


@pytest.fixture
def empty_assumptions() -> Assumptions:
    """Every assumption zeroed, so every component evaluates to 0."""
    return Assumptions(
        cost_per_reset=0,
        resets_per_year_per_employee=0,
        avg_hourly_wage=0,
        it_staff_hourly_rate=0,
        breach_cost=0,
        breach_risk_reduction_pct=0,
    )
