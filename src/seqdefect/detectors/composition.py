"""Windowed GC-content and GC:AT ratio checks.

Both scans slide one symbol at a time and jump a whole window ahead after
reporting, so reported windows never overlap.
"""

from __future__ import annotations

from typing import List

from ..models import Defect, DefectKind, Metrics, Severity

GC_WINDOW = 20
GC_HIGH = 0.8
GC_LOW = 0.2

RATIO_WINDOW = 30
RATIO_FOLD = 3.0


def _gc_count(window: str) -> int:
    return window.count("G") + window.count("C")


def detect_gc_imbalance(dna: str, metrics: Metrics) -> List[Defect]:
    out: List[Defect] = []
    i = 0
    while i <= len(dna) - GC_WINDOW:
        local_gc = _gc_count(dna[i:i + GC_WINDOW]) / GC_WINDOW
        if local_gc > GC_HIGH:
            kind, severity, label = DefectKind.HIGH_GC_CONTENT, Severity.MEDIUM, "high"
        elif local_gc < GC_LOW:
            kind, severity, label = DefectKind.LOW_GC_CONTENT, Severity.LOW, "low"
        else:
            i += 1
            continue
        out.append(
            Defect(
                kind=kind,
                position=i,
                span=GC_WINDOW,
                severity=severity,
                description=f"Region with unusually {label} GC content ({local_gc * 100:.1f}%).",
            )
        )
        i += GC_WINDOW
    return out


def detect_ratio_imbalance(dna: str, metrics: Metrics) -> List[Defect]:
    """
    Flag 30-nt windows whose GC:AT ratio is more than 3x above or below the
    whole-sequence ratio. Anything that is not G or C counts on the AT side.
    """
    baseline = metrics.at_gc_ratio
    out: List[Defect] = []
    i = 0
    while i <= len(dna) - RATIO_WINDOW:
        gc = _gc_count(dna[i:i + RATIO_WINDOW])
        at = RATIO_WINDOW - gc
        if at == 0:
            i += 1
            continue
        local_ratio = gc / at
        if local_ratio > baseline * RATIO_FOLD or local_ratio < baseline / RATIO_FOLD:
            out.append(
                Defect(
                    kind=DefectKind.RATIO_IMBALANCE,
                    position=i,
                    span=RATIO_WINDOW,
                    severity=Severity.LOW,
                    description=(
                        f"Region with unusual AT/GC ratio ({local_ratio:.2f} "
                        f"vs {baseline:.2f} overall)."
                    ),
                )
            )
            i += RATIO_WINDOW
        else:
            i += 1
    return out
