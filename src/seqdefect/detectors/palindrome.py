from __future__ import annotations

from typing import List

from Bio.Seq import reverse_complement

from ..models import Defect, DefectKind, Metrics, Severity
from ..scan import is_standard

CANDIDATE_LENGTHS = (6, 8, 10, 12)


def is_self_complementary(segment: str) -> bool:
    """True when an A/T/G/C segment reads the same as its reverse complement."""
    if not segment or not is_standard(segment):
        return False
    return reverse_complement(segment) == segment


def detect_palindromes(dna: str, metrics: Metrics) -> List[Defect]:
    """
    Shortest self-complementary segment (6..12 nt, even lengths) at each start.

    Unlike the other scans this one always advances by one, so hits at
    neighbouring starts may overlap.
    """
    out: List[Defect] = []
    n = len(dna)
    for i in range(n - CANDIDATE_LENGTHS[0] + 1):
        for length in CANDIDATE_LENGTHS:
            if i + length > n:
                break
            segment = dna[i:i + length]
            if is_self_complementary(segment):
                out.append(
                    Defect(
                        kind=DefectKind.PALINDROME,
                        position=i,
                        span=length,
                        severity=Severity.MEDIUM if length >= 10 else Severity.LOW,
                        description=f"Palindromic sequence {segment} detected (can form hairpin structures).",
                    )
                )
                break
    return out
