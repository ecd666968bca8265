from __future__ import annotations

from typing import List

from ..models import Defect, DefectKind, Metrics, Severity
from ..scan import homopolymer_runs

MIN_HOMOPOLYMER = 6


def _severity(length: int) -> Severity:
    if length >= 10:
        return Severity.HIGH
    if length >= 8:
        return Severity.MEDIUM
    return Severity.LOW


def detect_homopolymers(dna: str, metrics: Metrics) -> List[Defect]:
    return [
        Defect(
            kind=DefectKind.HOMOPOLYMER,
            position=run.start,
            span=run.length,
            severity=_severity(run.length),
            description=f"Long stretch of {run.unit} nucleotides (length: {run.length}).",
        )
        for run in homopolymer_runs(dna, MIN_HOMOPOLYMER)
    ]
