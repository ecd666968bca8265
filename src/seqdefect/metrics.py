from __future__ import annotations

from .models import Metrics
from .scan import find_repeat_blocks


def compute_metrics(sequence: str) -> Metrics:
    """
    Whole-sequence composition metrics.

    Symbols outside A/T/G/C are part of the length but never of any tally, so
    they pull gc_content down without touching at_gc_ratio.
    """
    dna = sequence.upper()
    g, c = dna.count("G"), dna.count("C")
    a, t = dna.count("A"), dna.count("T")

    gc_content = (g + c) / len(dna) if dna else 0.0
    at_gc_ratio = (g + c) / (a + t) if (a + t) > 0 else 0.0
    repeat_count = sum(1 for _ in find_repeat_blocks(dna, min_unit=3))

    return Metrics(gc_content=gc_content, at_gc_ratio=at_gc_ratio, repeat_count=repeat_count)
