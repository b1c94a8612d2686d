from .enums import ComponentCategory, ComponentId, PresetName
from .inputs import Assumptions, OrgProfile, default_assumptions

__all__ = [
    "Assumptions",
    "ComponentCategory",
    "ComponentId",
    "OrgProfile",
    "PresetName",
    "default_assumptions",
]
