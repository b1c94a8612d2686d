from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from roi_estimator.models.enums import ComponentCategory

# Global registry -- maps component_id -> ComponentDefinition
_REGISTRY: dict[str, ComponentDefinition] = {}


@dataclass(frozen=True)
class ComponentDefinition:
    """A savings component formula in the library."""

    id: str
    label: str
    profile_inputs: list[str]  # OrgProfile field names
    assumption_inputs: list[str]  # Assumptions field names
    citation_key: str  # Default when the methodology gives no override
    formula_fn: Callable[..., float]
    category: ComponentCategory = ComponentCategory.COST_SAVINGS

    @property
    def inputs(self) -> list[str]:
        return [*self.profile_inputs, *self.assumption_inputs]


def register_component(
    component_id: str,
    label: str,
    profile_inputs: list[str],
    assumption_inputs: list[str],
    citation_key: str,
    category: ComponentCategory = ComponentCategory.COST_SAVINGS,
) -> Callable:
    """Decorator to register a formula function as a savings component."""

    def decorator(fn: Callable[..., float]) -> Callable[..., float]:
        definition = ComponentDefinition(
            id=component_id,
            label=label,
            profile_inputs=profile_inputs,
            assumption_inputs=assumption_inputs,
            citation_key=citation_key,
            formula_fn=fn,
            category=category,
        )
        _REGISTRY[component_id] = definition
        return fn

    return decorator


def get_component(component_id: str) -> Optional[ComponentDefinition]:
    """Look up a component definition by ID."""
    return _REGISTRY.get(component_id)


def get_all_components() -> dict[str, ComponentDefinition]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)
