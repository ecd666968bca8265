from __future__ import annotations

from typing import List

from ..models import Defect, DefectKind, Metrics, Severity
from ..scan import STANDARD_BASES


def detect_non_standard_bases(dna: str, metrics: Metrics) -> List[Defect]:
    # One finding per offending symbol; adjacent ones are not merged.
    return [
        Defect(
            kind=DefectKind.NON_STANDARD_BASE,
            position=i,
            span=1,
            severity=Severity.HIGH,
            description=f'Non-standard nucleotide "{base}" detected.',
        )
        for i, base in enumerate(dna)
        if base not in STANDARD_BASES
    ]
