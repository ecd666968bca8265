"""Synthetic demo sequences with a handful of deliberately planted anomalies."""

from __future__ import annotations

import random
from typing import Optional

BASES = "ATGC"
GC_RICH_BLOCK = "GCGCGCGCGCGCGCG"
PALINDROME = "ATGCGCAT"


def _splice(dna: str, pos: int, insert: str) -> str:
    return dna[:pos] + insert + dna[pos + len(insert):]


def generate_synthetic_sequence(
    length: int = 200,
    defect_count: int = 5,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Random A/T/G/C sequence with up to five planted anomalies, added in order:
    an 8-nt homopolymer, a duplicated 4-nt unit (inserted, so the result is 4 nt
    longer), one N, a GC-rich block and the palindrome ATGCGCAT.

    Pass `seed` (or your own `rng`) for reproducible output.
    """
    if length < 0 or defect_count < 0:
        raise ValueError("length and defect_count must be non-negative.")
    if defect_count > 0 and length <= 20:
        raise ValueError(f"length must be greater than 20 to embed defects (got {length}).")

    rng = rng or random.Random(seed)
    dna = "".join(rng.choice(BASES) for _ in range(length))

    if defect_count > 0:
        pos = rng.randrange(length - 10)
        dna = _splice(dna, pos, rng.choice(BASES) * 8)

    if defect_count > 1:
        pos = rng.randrange(length - 20)
        unit = dna[pos:pos + 4]
        dna = dna[:pos + 4] + unit + dna[pos + 4:]

    if defect_count > 2:
        pos = rng.randrange(length)
        dna = _splice(dna, pos, "N")

    if defect_count > 3:
        pos = rng.randrange(length - 15)
        dna = _splice(dna, pos, GC_RICH_BLOCK)

    if defect_count > 4:
        pos = rng.randrange(length - 10)
        dna = _splice(dna, pos, PALINDROME)

    return dna
