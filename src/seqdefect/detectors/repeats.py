from __future__ import annotations

from typing import List

from ..models import Defect, DefectKind, Metrics, Severity
from ..scan import find_tandem_runs

DIRECT_UNIT_LENGTHS = range(4, 9)  # 4..8 inclusive
TRIPLET_MIN_COPIES = 4
TRIPLET_MEDIUM_SPAN = 15


def _direct_repeats(dna: str) -> List[Defect]:
    # Unit lengths are scanned one after another, so the same region can be
    # reported once per unit length.
    out: List[Defect] = []
    n = len(dna)
    for unit_len in DIRECT_UNIT_LENGTHS:
        i = 0
        while i <= n - 2 * unit_len:
            segment = dna[i:i + unit_len]
            if dna.startswith(segment, i + unit_len):
                out.append(
                    Defect(
                        kind=DefectKind.DIRECT_REPEAT,
                        position=i,
                        span=2 * unit_len,
                        severity=Severity.LOW,
                        description=f"Direct repeat of {segment} detected.",
                    )
                )
                i += 2 * unit_len
            else:
                i += 1
    return out


def _triplet_repeats(dna: str) -> List[Defect]:
    out: List[Defect] = []
    for run in find_tandem_runs(dna, unit_len=3, min_copies=TRIPLET_MIN_COPIES):
        out.append(
            Defect(
                kind=DefectKind.TRIPLET_REPEAT,
                position=run.start,
                span=run.length,
                severity=Severity.MEDIUM if run.length >= TRIPLET_MEDIUM_SPAN else Severity.LOW,
                description=f"Triplet repeat of {run.unit} detected ({run.copies} repeats).",
            )
        )
    return out


def detect_repeats(dna: str, metrics: Metrics) -> List[Defect]:
    return _direct_repeats(dna) + _triplet_repeats(dna)
