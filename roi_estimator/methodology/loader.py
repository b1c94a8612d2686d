"""Load and validate methodology configs.

The bundled configs ship as package data under ``configs/`` and are read
through ``importlib.resources``; custom configs are read from disk.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from roi_estimator.methodology.schema import MethodologyConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "passwordless_v1.json"


def _bundled_config_text(name: str) -> str:
    resource = resources.files("roi_estimator.methodology").joinpath("configs").joinpath(name)
    if not resource.is_file():
        raise FileNotFoundError(f"No bundled methodology named '{name}'")
    return resource.read_text(encoding="utf-8")


def parse_methodology(text: str, source: str = "<string>") -> MethodologyConfig:
    """Parse and validate methodology JSON, naming the config on failure."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Methodology config {source} is not valid JSON: {e}") from e

    methodology_id = raw.get("id", "<no id>") if isinstance(raw, dict) else "<no id>"
    try:
        config = MethodologyConfig.model_validate(raw)
    except ValidationError:
        logger.error(
            "Methodology '%s' from %s failed validation", methodology_id, source
        )
        raise

    logger.debug("Loaded methodology %s@%s from %s", config.id, config.version, source)
    return config


def load_methodology(file_path: Path | None = None) -> MethodologyConfig:
    """Load a methodology from a JSON file, or the bundled V1 config."""
    if file_path is None:
        return parse_methodology(
            _bundled_config_text(DEFAULT_CONFIG_NAME), source=f"bundled:{DEFAULT_CONFIG_NAME}"
        )

    if not file_path.exists():
        raise FileNotFoundError(f"Methodology config not found: {file_path}")
    return parse_methodology(file_path.read_text(encoding="utf-8"), source=str(file_path))


@lru_cache(maxsize=1)
def get_default_methodology() -> MethodologyConfig:
    """The bundled passwordless V1 methodology (parsed once)."""
    return load_methodology()
