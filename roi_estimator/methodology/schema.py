"""Pydantic models for methodology configuration validation."""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from roi_estimator.citations.registry import get_citation
from roi_estimator.models.inputs import Assumptions


def _check_citation_key(key: Optional[str]) -> Optional[str]:
    if key is not None and get_citation(key) is None:
        raise ValueError(f"Citation '{key}' is not in the citation registry")
    return key


class AssumptionRange(BaseModel):
    """Researched range for a single editable assumption."""

    label: str
    min: Optional[float] = Field(default=None, description="Lower research bound")
    max: Optional[float] = Field(default=None, description="Upper research bound")
    step: float = Field(default=1, gt=0, description="Slider increment")
    citation_key: Optional[str] = None

    @field_validator("citation_key")
    @classmethod
    def citation_must_exist(cls, v: Optional[str]) -> Optional[str]:
        return _check_citation_key(v)

    @model_validator(mode="after")
    def min_le_max(self) -> AssumptionRange:
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(
                f"Assumption range for '{self.label}' is inverted: "
                f"min ({self.min}) > max ({self.max})"
            )
        return self

    def contains(self, value: float) -> bool:
        if not math.isfinite(value):
            return False
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True


class ComponentConfig(BaseModel):
    """Display configuration for a single savings component."""

    id: str = Field(description="Must match a registered component in the library")
    label: Optional[str] = Field(default=None, description="Display label override")
    formula: str = Field(description="Human-readable formula description")
    citation_key: Optional[str] = Field(
        default=None, description="Citation override; defaults to the registered component's key"
    )

    @field_validator("id")
    @classmethod
    def id_must_be_registered(cls, v: str) -> str:
        # Package import registers every formula
        from roi_estimator.kpi_library import get_component

        if get_component(v) is None:
            raise ValueError(f"Component '{v}' is not registered in the library")
        return v

    @field_validator("citation_key")
    @classmethod
    def citation_must_exist(cls, v: Optional[str]) -> Optional[str]:
        return _check_citation_key(v)


class MethodologyConfig(BaseModel):
    """Top-level methodology configuration."""

    id: str
    name: str
    version: str
    components: list[ComponentConfig] = Field(min_length=1)
    assumptions: dict[str, AssumptionRange] = Field(default_factory=dict)

    @field_validator("assumptions")
    @classmethod
    def assumption_names_known(
        cls, v: dict[str, AssumptionRange]
    ) -> dict[str, AssumptionRange]:
        unknown = set(v) - set(Assumptions.model_fields)
        if unknown:
            raise ValueError(f"Unknown assumptions in methodology: {sorted(unknown)}")
        return v

    @model_validator(mode="after")
    def every_component_exactly_once(self) -> MethodologyConfig:
        from roi_estimator.kpi_library import get_all_components

        ids = [c.id for c in self.components]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate components in methodology: {duplicates}")
        missing = sorted(set(get_all_components()) - set(ids))
        if missing:
            raise ValueError(f"Methodology is missing components: {missing}")
        return self

    @model_validator(mode="after")
    def defaults_within_ranges(self) -> MethodologyConfig:
        defaults = Assumptions()
        for name, rng in self.assumptions.items():
            value = getattr(defaults, name)
            if not rng.contains(value):
                raise ValueError(
                    f"Default {name}={value} falls outside its researched range "
                    f"[{rng.min}, {rng.max}]"
                )
        return self

    def component_ids(self) -> list[str]:
        return [c.id for c in self.components]

    def out_of_range(self, assumptions: Assumptions) -> list[str]:
        """Return the assumption names whose values sit outside their range."""
        return [
            name
            for name, rng in self.assumptions.items()
            if not rng.contains(getattr(assumptions, name))
        ]
