from __future__ import annotations

from typing import List, Protocol

from ..models import Defect, Metrics


class Detector(Protocol):
    """A pure scan over an uppercased sequence; `metrics` is the whole-sequence baseline."""

    def __call__(self, dna: str, metrics: Metrics) -> List[Defect]:
        ...
