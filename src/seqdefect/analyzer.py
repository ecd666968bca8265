from __future__ import annotations

import logging
from typing import List, Tuple, Union

from .detectors import (
    Detector,
    detect_frameshifts,
    detect_gc_imbalance,
    detect_homopolymers,
    detect_non_standard_bases,
    detect_palindromes,
    detect_ratio_imbalance,
    detect_repeats,
)
from .metrics import compute_metrics
from .models import AnalysisDepth, AnalysisResult, Defect

log = logging.getLogger(__name__)

BASIC_DETECTORS: Tuple[Detector, ...] = (
    detect_frameshifts,
    detect_repeats,
    detect_non_standard_bases,
)

COMPREHENSIVE_DETECTORS: Tuple[Detector, ...] = BASIC_DETECTORS + (
    detect_gc_imbalance,
    detect_homopolymers,
    detect_ratio_imbalance,
    detect_palindromes,
)


class InvalidSequenceError(ValueError):
    """Raised when no sequence string was supplied to analyze()."""


def detectors_for(depth: Union[str, AnalysisDepth]) -> Tuple[Detector, ...]:
    if AnalysisDepth.parse(depth) is AnalysisDepth.COMPREHENSIVE:
        return COMPREHENSIVE_DETECTORS
    return BASIC_DETECTORS


def analyze(sequence: str, depth: Union[str, AnalysisDepth] = AnalysisDepth.BASIC) -> AnalysisResult:
    """
    Run the detectors selected by `depth` over the uppercased sequence.

    Defects are concatenated in detector order and, within a detector, in
    emission order; they are never re-sorted by position.
    """
    if sequence is None:
        raise InvalidSequenceError("A sequence is required.")
    if not isinstance(sequence, str):
        raise InvalidSequenceError(f"Sequence must be a string, got {type(sequence).__name__}.")

    depth = AnalysisDepth.parse(depth)
    detectors = detectors_for(depth)
    dna = sequence.upper()
    metrics = compute_metrics(dna)

    defects: List[Defect] = []
    for detector in detectors:
        found = detector(dna, metrics)
        log.debug("%s: %d finding(s)", detector.__name__, len(found))
        defects.extend(found)

    log.info(
        "Analysed %d nt (%s): %d defect(s), GC=%.3f",
        len(dna),
        depth.value,
        len(defects),
        metrics.gc_content,
    )
    return AnalysisResult(defects=tuple(defects), metrics=metrics)
