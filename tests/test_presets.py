"""Tests for organization-size presets."""

import pytest

from roi_estimator.models.enums import PresetName
from roi_estimator.models.inputs import Assumptions, OrgProfile
from roi_estimator.presets import apply_preset, get_all_presets, get_preset


class TestPresets:
    def test_three_presets_in_size_order(self):
        names = [p.name for p in get_all_presets()]
        assert names == [PresetName.SMB, PresetName.MID, PresetName.ENTERPRISE]

    @pytest.mark.parametrize(
        "name,employees,devices,premium",
        [
            ("smb", 100, 120, 25_000),
            ("mid", 500, 600, 100_000),
            ("enterprise", 5_000, 6_000, 500_000),
        ],
    )
    def test_preset_values(self, name, employees, devices, premium):
        preset = get_preset(name)
        assert preset.employee_count == employees
        assert preset.device_count == devices
        assert preset.annual_insurance_premium == premium

    def test_unknown_preset_is_none(self):
        assert get_preset("mega") is None

    def test_apply_preset_mutates_profile_in_place(self):
        profile = OrgProfile(employee_count=1, device_count=1, annual_insurance_premium=1)
        returned = apply_preset(profile, "enterprise")
        assert returned is profile
        assert profile.employee_count == 5_000
        assert profile.device_count == 6_000
        assert profile.annual_insurance_premium == 500_000

    def test_apply_preset_accepts_enum(self):
        profile = apply_preset(OrgProfile(), PresetName.SMB)
        assert profile.employee_count == 100

    def test_apply_unknown_preset_raises_and_leaves_profile(self):
        profile = OrgProfile(employee_count=42)
        with pytest.raises(ValueError, match="Unknown preset"):
            apply_preset(profile, "mega")
        assert profile.employee_count == 42

    def test_preset_does_not_touch_assumptions(self):
        assumptions = Assumptions(cost_per_reset=120)
        apply_preset(OrgProfile(), "mid")
        assert assumptions.cost_per_reset == 120

    def test_to_profile_builds_fresh_instance(self):
        preset = get_preset("smb")
        assert preset.to_profile() is not preset.to_profile()
        assert preset.to_profile().employee_count == 100


class TestPresetNameLookup:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("SMB", PresetName.SMB),
            (" mid ", PresetName.MID),
            ("Enterprise", PresetName.ENTERPRISE),
            ("ent", PresetName.ENTERPRISE),
            ("ENT", PresetName.ENTERPRISE),
            (PresetName.MID, PresetName.MID),
        ],
    )
    def test_case_insensitive_names_and_alias(self, name, expected):
        assert get_preset(name).name == expected

    def test_apply_preset_uppercase_name(self):
        profile = apply_preset(OrgProfile(), "SMB")
        assert profile.employee_count == 100
        assert profile.annual_insurance_premium == 25_000

    def test_unknown_preset_message_lists_alias(self):
        with pytest.raises(ValueError, match="'ent'"):
            apply_preset(OrgProfile(), "large")
