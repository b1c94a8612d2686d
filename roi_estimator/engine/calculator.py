"""Core calculation engine.

Takes an org profile + assumptions -> produces an ROIResult with the
inputs behind every component.
"""

from __future__ import annotations

import logging
from typing import Optional

# Ensure all formulas are registered on import
import roi_estimator.kpi_library.formulas  # noqa: F401
from roi_estimator.engine.result import ComponentResult, ROIResult
from roi_estimator.kpi_library.formulas import estimate_tickets
from roi_estimator.kpi_library.registry import ComponentDefinition, get_component
from roi_estimator.methodology.loader import get_default_methodology
from roi_estimator.methodology.schema import ComponentConfig, MethodologyConfig
from roi_estimator.models.inputs import Assumptions, OrgProfile

logger = logging.getLogger(__name__)


class ROIEngine:
    """Stateless engine that runs the ROI calculation.

    Holds only configuration; every call to ``calculate`` is independent
    and never mutates its inputs.
    """

    def __init__(
        self,
        methodology: Optional[MethodologyConfig] = None,
        clamp_negative_inputs: bool = False,
    ) -> None:
        self.methodology = methodology or get_default_methodology()
        self.clamp_negative_inputs = clamp_negative_inputs

    def calculate(self, profile: OrgProfile, assumptions: Assumptions) -> ROIResult:
        """Compute all five components, their total and percent breakdown."""
        if self.clamp_negative_inputs:
            profile = profile.clamped()
            assumptions = assumptions.clamped()

        warnings = [
            f"{self.methodology.assumptions[name].label} ({getattr(assumptions, name)}) "
            "is outside its researched range"
            for name in self.methodology.out_of_range(assumptions)
        ]

        raw: list[tuple[ComponentConfig, ComponentDefinition, float, dict[str, float]]] = []
        for component_config in self.methodology.components:
            kpi_def = get_component(component_config.id)
            if kpi_def is None:
                raise KeyError(f"Component '{component_config.id}' not found in registry")
            inputs_used = self._gather_inputs(kpi_def, profile, assumptions)
            value = kpi_def.formula_fn(**inputs_used)
            raw.append((component_config, kpi_def, value, inputs_used))

        # Summed in component order so total equals the sum of the parts exactly
        total = sum(value for _, _, value, _ in raw)

        components = [
            ComponentResult(
                id=kpi_def.id,
                name=component_config.label or kpi_def.label,
                value=value,
                formula_description=component_config.formula,
                citation_key=component_config.citation_key or kpi_def.citation_key,
                percent_of_total=self._percent_of_total(value, total),
                inputs_used=inputs_used,
                category=kpi_def.category,
            )
            for component_config, kpi_def, value, inputs_used in raw
        ]

        logger.debug(
            "ROI calculated: employees=%s total=%.2f warnings=%d",
            profile.employee_count,
            total,
            len(warnings),
        )

        return ROIResult(
            components=components,
            total=total,
            estimated_tickets=estimate_tickets(profile.employee_count),
            methodology_id=self.methodology.id,
            methodology_version=self.methodology.version,
            warnings=warnings,
        )

    @staticmethod
    def _gather_inputs(
        kpi_def: ComponentDefinition,
        profile: OrgProfile,
        assumptions: Assumptions,
    ) -> dict[str, float]:
        inputs: dict[str, float] = {}
        for field_name in kpi_def.profile_inputs:
            inputs[field_name] = getattr(profile, field_name)
        for field_name in kpi_def.assumption_inputs:
            inputs[field_name] = getattr(assumptions, field_name)
        return inputs

    @staticmethod
    def _percent_of_total(value: float, total: float) -> float:
        if total == 0:
            return 0.0
        return value / total * 100


def compute_roi(
    profile: OrgProfile,
    assumptions: Optional[Assumptions] = None,
    clamp_negative_inputs: bool = False,
) -> ROIResult:
    """Convenience wrapper: calculate with the default methodology."""
    engine = ROIEngine(clamp_negative_inputs=clamp_negative_inputs)
    return engine.calculate(profile, assumptions or Assumptions())
