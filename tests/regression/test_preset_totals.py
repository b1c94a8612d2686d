"""Regression tests for preset totals -- guards against formula drift."""

import pytest

from roi_estimator.engine.calculator import ROIEngine
from roi_estimator.models.inputs import Assumptions
from roi_estimator.presets import get_preset


class TestPresetRegression:
    """Baselines for each preset under literature-default assumptions."""

    def _run(self, name):
        return ROIEngine().calculate(get_preset(name).to_profile(), Assumptions())

    def test_smb_baseline(self):
        result = self._run("smb")
        assert result.value_of("password_reset") == 21_000
        assert result.value_of("productivity") == pytest.approx(208_333.33, abs=0.01)
        assert result.value_of("breach_risk") == pytest.approx(384_800)
        assert result.value_of("insurance") == pytest.approx(6_250)
        # 1,000 estimated tickets floors to 2,000
        assert result.estimated_tickets == 2_000
        assert result.value_of("help_desk") == pytest.approx(6_000)
        assert result.total == pytest.approx(626_383.33, abs=0.01)

    def test_mid_baseline(self):
        result = self._run("mid")
        assert result.total == pytest.approx(1_571_466.67, abs=0.01)

    def test_enterprise_baseline(self):
        result = self._run("enterprise")
        assert result.value_of("password_reset") == 1_050_000
        assert result.value_of("productivity") == pytest.approx(10_416_666.67, abs=0.01)
        assert result.value_of("insurance") == pytest.approx(125_000)
        assert result.estimated_tickets == 50_000
        assert result.value_of("help_desk") == pytest.approx(150_000)
        assert result.total == pytest.approx(12_126_466.67, abs=0.01)

    def test_breach_component_is_size_independent(self):
        values = {self._run(name).value_of("breach_risk") for name in ("smb", "mid", "enterprise")}
        assert len(values) == 1

    def test_totals_increase_with_size(self):
        totals = [self._run(name).total for name in ("smb", "mid", "enterprise")]
        assert totals == sorted(totals)

    def test_productivity_dominates_enterprise(self):
        result = self._run("enterprise")
        top = max(result.components, key=lambda c: c.percent_of_total)
        assert top.id == "productivity"
        assert top.percent_of_total > 80
