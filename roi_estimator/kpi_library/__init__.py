# Importing formulas populates the registry
from . import formulas  # noqa: F401
from .registry import ComponentDefinition, get_all_components, get_component

__all__ = ["ComponentDefinition", "get_all_components", "get_component"]
