"""Tests for environment-driven settings."""

from roi_estimator.config.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ROI_CLAMP_NEGATIVE_INPUTS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.clamp_negative_inputs is False
        assert settings.currency_symbol == "$"
        assert settings.methodology_path is None
        assert settings.cors_origins == ["http://localhost:3000"]

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("ROI_CLAMP_NEGATIVE_INPUTS", "true")
        monkeypatch.setenv("ROI_PORT", "9000")
        settings = Settings(_env_file=None)
        assert settings.clamp_negative_inputs is True
        assert settings.port == 9000
