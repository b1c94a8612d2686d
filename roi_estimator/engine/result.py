"""Immutable result and calculation trail data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from roi_estimator.models.enums import ComponentCategory


@dataclass(frozen=True)
class ComponentResult:
    """One savings component with the inputs that produced it."""

    id: str
    name: str
    value: float
    formula_description: str
    citation_key: str
    percent_of_total: float
    inputs_used: dict[str, float]
    category: ComponentCategory

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "value": self.value,
            "formula_description": self.formula_description,
            "citation_key": self.citation_key,
            "percent_of_total": self.percent_of_total,
            "inputs_used": dict(self.inputs_used),
            "category": self.category.value,
        }


@dataclass(frozen=True)
class ROIResult:
    """Top-level result for one snapshot of profile + assumptions."""

    components: list[ComponentResult]
    total: float
    estimated_tickets: int
    methodology_id: str
    methodology_version: str
    warnings: list[str] = field(default_factory=list)

    def component(self, component_id: str) -> Optional[ComponentResult]:
        """Look up a component by ID."""
        for entry in self.components:
            if entry.id == component_id:
                return entry
        return None

    def value_of(self, component_id: str) -> float:
        entry = self.component(component_id)
        if entry is None:
            raise KeyError(component_id)
        return entry.value

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready rendering, unrounded."""
        return {
            "total": self.total,
            "components": [c.to_dict() for c in self.components],
            "estimated_tickets": self.estimated_tickets,
            "methodology_id": self.methodology_id,
            "methodology_version": self.methodology_version,
            "warnings": list(self.warnings),
        }
