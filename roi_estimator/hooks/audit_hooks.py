"""Audit hooks: logs each ROI calculation for the audit trail."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from roi_estimator.engine.result import ROIResult
from roi_estimator.models.inputs import Assumptions, OrgProfile

logger = logging.getLogger(__name__)


def log_calculation(
    source: str,
    profile: OrgProfile,
    assumptions: Assumptions,
    result: ROIResult,
) -> dict[str, Any]:
    """Record a calculation in the audit log.

    Returns the audit entry dict for downstream persistence.
    """
    entry = {
        "source": source,
        "profile": profile.model_dump(),
        "assumptions": assumptions.model_dump(),
        "total": result.total,
        "methodology": f"{result.methodology_id}@{result.methodology_version}",
        "warnings": list(result.warnings),
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }
    logger.info("ROI calculation audit: %s → total=%.2f", source, result.total)
    return entry
