"""Edge case tests -- zero employees, zero total, negative inputs."""

import pytest

from roi_estimator.engine.calculator import ROIEngine
from roi_estimator.models.inputs import Assumptions, OrgProfile


class TestEdgeCases:
    def test_zero_employees_keeps_help_desk_floor(self, engine, zero_employee_profile, default_assumptions):
        """0 employees: resets and productivity vanish, help desk uses 2,000 tickets."""
        result = engine.calculate(zero_employee_profile, default_assumptions)
        assert result.value_of("password_reset") == 0
        assert result.value_of("productivity") == 0
        assert result.estimated_tickets == 2_000
        assert result.value_of("help_desk") == pytest.approx(2000 * 0.30 * (10 / 60) * 60)
        assert result.total == pytest.approx(384_800 + 25_000 + 6_000)
        assert result.total > 0

    def test_zero_total_gives_zero_percentages(self, engine, empty_assumptions):
        profile = OrgProfile(employee_count=0, device_count=0, annual_insurance_premium=0)
        result = engine.calculate(profile, empty_assumptions)
        assert result.total == 0
        for component in result.components:
            assert component.percent_of_total == 0.0

    def test_negative_inputs_flow_through_by_default(self, engine, default_assumptions):
        profile = OrgProfile(employee_count=500, annual_insurance_premium=-40_000)
        result = engine.calculate(profile, default_assumptions)
        assert result.value_of("insurance") == pytest.approx(-10_000)

    def test_negative_inputs_clamped_when_enabled(self, default_assumptions):
        engine = ROIEngine(clamp_negative_inputs=True)
        profile = OrgProfile(employee_count=-5, annual_insurance_premium=-40_000)
        assumptions = Assumptions(breach_cost=-1)
        result = engine.calculate(profile, assumptions)
        assert result.value_of("insurance") == 0
        assert result.value_of("password_reset") == 0
        assert result.value_of("breach_risk") == 0
        # Clamping never touches the caller's objects
        assert profile.employee_count == -5
        assert assumptions.breach_cost == -1

    def test_huge_organization(self, engine, default_assumptions):
        profile = OrgProfile(employee_count=1_000_000, annual_insurance_premium=10_000_000)
        result = engine.calculate(profile, default_assumptions)
        assert result.estimated_tickets == 10_000_000
        assert result.total == sum(c.value for c in result.components)
