from __future__ import annotations

from typing import List

from ..models import Defect, DefectKind, Metrics, Severity

CODON_LENGTH = 3


def detect_frameshifts(dna: str, metrics: Metrics) -> List[Defect]:
    """
    Length not a multiple of 3, plus back-to-back identical single-symbol codons
    (e.g. AAAAAA). After a codon hit the scan jumps past both codons.
    """
    out: List[Defect] = []
    n = len(dna)

    remainder = n % CODON_LENGTH
    if remainder:
        out.append(
            Defect(
                kind=DefectKind.FRAMESHIFT,
                position=n - remainder,
                span=remainder,
                severity=Severity.HIGH,
                description=(
                    f"Potential frameshift mutation detected. "
                    f"Sequence length ({n}) is not divisible by 3 ({remainder} trailing nt)."
                ),
            )
        )

    i = 0
    while i < n - 2 * CODON_LENGTH:
        codon = dna[i:i + CODON_LENGTH]
        if codon == dna[i + CODON_LENGTH:i + 2 * CODON_LENGTH] and codon == codon[0] * CODON_LENGTH:
            out.append(
                Defect(
                    kind=DefectKind.UNUSUAL_REPEAT,
                    position=i,
                    span=2 * CODON_LENGTH,
                    severity=Severity.MEDIUM,
                    description=f"Unusual repeat of {codon} detected, possible sequencing error or mutation.",
                )
            )
            i += 2 * CODON_LENGTH
        else:
            i += 1
    return out
