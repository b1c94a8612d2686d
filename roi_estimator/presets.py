"""Named organization-size presets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from roi_estimator.models.enums import PresetName
from roi_estimator.models.inputs import OrgProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Preset:
    name: PresetName
    label: str
    employee_count: int
    device_count: int
    annual_insurance_premium: float

    def to_profile(self) -> OrgProfile:
        return OrgProfile(
            employee_count=self.employee_count,
            device_count=self.device_count,
            annual_insurance_premium=self.annual_insurance_premium,
        )


_PRESETS: dict[PresetName, Preset] = {
    PresetName.SMB: Preset(PresetName.SMB, "SMB", 100, 120, 25_000),
    PresetName.MID: Preset(PresetName.MID, "Mid", 500, 600, 100_000),
    PresetName.ENTERPRISE: Preset(PresetName.ENTERPRISE, "Enterprise", 5_000, 6_000, 500_000),
}


# Short names accepted alongside the enum values
_ALIASES: dict[str, PresetName] = {
    "ent": PresetName.ENTERPRISE,
}


def _resolve_name(name: PresetName | str) -> Optional[PresetName]:
    if isinstance(name, PresetName):
        return name
    key = str(name).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return PresetName(key)
    except ValueError:
        return None


def get_preset(name: PresetName | str) -> Optional[Preset]:
    """Look up a preset by name, case-insensitively ("smb", "mid", "enterprise" or "ent")."""
    preset_name = _resolve_name(name)
    return _PRESETS[preset_name] if preset_name is not None else None


def get_all_presets() -> list[Preset]:
    return list(_PRESETS.values())


def apply_preset(profile: OrgProfile, name: PresetName | str) -> OrgProfile:
    """Overwrite the sizing fields of ``profile`` with a preset, in place.

    All three fields are set together; assumptions are left untouched.
    """
    preset = get_preset(name)
    if preset is None:
        raise ValueError(
            f"Unknown preset '{name}', expected one of {[p.value for p in PresetName] + list(_ALIASES)}"
        )
    profile.employee_count = preset.employee_count
    profile.device_count = preset.device_count
    profile.annual_insurance_premium = preset.annual_insurance_premium
    logger.info("Applied %s preset", preset.name.value.upper())
    return profile
