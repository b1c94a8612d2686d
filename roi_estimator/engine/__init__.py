from .calculator import ROIEngine, compute_roi
from .result import ComponentResult, ROIResult

__all__ = ["ComponentResult", "ROIEngine", "ROIResult", "compute_roi"]
