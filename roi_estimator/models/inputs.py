"""Caller-owned input models for the ROI calculation.

Both models coerce types at the boundary (``"500"`` becomes ``500``) and
reject anything that cannot be coerced. NaN, infinity and magnitudes beyond
``MAX_INPUT_MAGNITUDE`` are rejected so every formula stays finite. Ranges
are not enforced here: the researched ranges live in the methodology config
and only produce warnings.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Largest absolute value any input may take; products of two such values
# times the formula constants stay well inside float range
MAX_INPUT_MAGNITUDE = 1e15


def _check_magnitude(value: float) -> float:
    if abs(value) > MAX_INPUT_MAGNITUDE:
        raise ValueError(
            f"must be between -{MAX_INPUT_MAGNITUDE:,.0f} and {MAX_INPUT_MAGNITUDE:,.0f}"
        )
    return value


class OrgProfile(BaseModel):
    """Organization sizing inputs."""

    model_config = ConfigDict(validate_assignment=True, allow_inf_nan=False)

    employee_count: int = Field(default=500, description="Total employees")
    device_count: int = Field(
        default=500, description="Managed devices (display-only, unused by formulas)"
    )
    annual_insurance_premium: float = Field(
        default=100_000, description="Annual cyber insurance premium"
    )

    @field_validator("*")
    @classmethod
    def within_magnitude(cls, v: float) -> float:
        return _check_magnitude(v)

    def clamped(self) -> OrgProfile:
        """Return a copy with every numeric field floored at zero."""
        return OrgProfile(
            employee_count=max(0, self.employee_count),
            device_count=max(0, self.device_count),
            annual_insurance_premium=max(0.0, self.annual_insurance_premium),
        )


class Assumptions(BaseModel):
    """Research-seeded assumptions backing the formulas."""

    model_config = ConfigDict(validate_assignment=True, allow_inf_nan=False)

    cost_per_reset: float = Field(default=70, description="Fully loaded cost of one password reset")
    resets_per_year_per_employee: int = Field(default=3)
    avg_hourly_wage: float = Field(default=50)
    it_staff_hourly_rate: float = Field(default=60)
    breach_cost: float = Field(
        default=4_810_000, description="Average cost of a credential-related breach"
    )
    breach_risk_reduction_pct: float = Field(
        default=80, description="Percentage (0-100) of breach risk removed"
    )

    @field_validator("*")
    @classmethod
    def within_magnitude(cls, v: float) -> float:
        return _check_magnitude(v)

    def clamped(self) -> Assumptions:
        return Assumptions(
            **{name: max(0, value) for name, value in self.model_dump().items()}
        )


def default_assumptions() -> Assumptions:
    """Fresh literature-default assumptions (the "reset" action)."""
    return Assumptions()
