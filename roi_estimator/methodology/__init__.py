from .loader import get_default_methodology, load_methodology, parse_methodology
from .schema import AssumptionRange, ComponentConfig, MethodologyConfig

__all__ = [
    "AssumptionRange",
    "ComponentConfig",
    "MethodologyConfig",
    "get_default_methodology",
    "load_methodology",
    "parse_methodology",
]
