"""Passwordless authentication ROI estimator."""

from roi_estimator.engine import ComponentResult, ROIEngine, ROIResult, compute_roi
from roi_estimator.models import Assumptions, OrgProfile, default_assumptions

__all__ = [
    "Assumptions",
    "ComponentResult",
    "OrgProfile",
    "ROIEngine",
    "ROIResult",
    "compute_roi",
    "default_assumptions",
]
