from .models import AnalysisDepth, AnalysisResult, Defect, DefectKind, Metrics, Severity
from .metrics import compute_metrics
from .analyzer import InvalidSequenceError, analyze

__all__ = [
    "AnalysisDepth",
    "AnalysisResult",
    "Defect",
    "DefectKind",
    "Metrics",
    "Severity",
    "InvalidSequenceError",
    "analyze",
    "compute_metrics",
]
