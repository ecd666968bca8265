"""Explicit, bounded replacements for the regex scans used by the detectors.

All scans are leftmost-first and non-overlapping: once a run is reported the
scan resumes at its end, otherwise it moves forward by one symbol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

STANDARD_BASES = frozenset("ATGC")


@dataclass(frozen=True)
class TandemRun:
    start: int  # 0-based
    end: int    # 0-based, exclusive
    unit: str

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def copies(self) -> int:
        return self.length // len(self.unit)


def is_standard(seq: str) -> bool:
    return all(c in STANDARD_BASES for c in seq)


def _standard_run_length(seq: str, start: int) -> int:
    j = start
    while j < len(seq) and seq[j] in STANDARD_BASES:
        j += 1
    return j - start


def _extend_copies(seq: str, start: int, unit: str) -> int:
    """Return the end of the greedy run of `unit` copies beginning at `start`."""
    end = start
    step = len(unit)
    while seq.startswith(unit, end):
        end += step
    return end


def find_tandem_runs(seq: str, unit_len: int, min_copies: int) -> Iterator[TandemRun]:
    """
    Runs of one fixed-length unit over A/T/G/C repeated at least `min_copies` times.

    unit_len=1, min_copies=6 gives homopolymers of length >= 6;
    unit_len=3, min_copies=4 gives triplet repeats of 12+ symbols.
    """
    n = len(seq)
    i = 0
    while i + unit_len * min_copies <= n:
        unit = seq[i:i + unit_len]
        if is_standard(unit):
            end = _extend_copies(seq, i, unit)
            if (end - i) // unit_len >= min_copies:
                yield TandemRun(start=i, end=end, unit=unit)
                i = end
                continue
        i += 1


def find_repeat_blocks(seq: str, min_unit: int = 3) -> Iterator[TandemRun]:
    """
    Blocks of `min_unit`+ standard symbols immediately followed by one or more
    exact copies of themselves.

    At each start the longest block that has a copy right after it wins, and
    the copies are then taken greedily.
    """
    n = len(seq)
    i = 0
    while i < n:
        avail = _standard_run_length(seq, i)
        found = None
        for unit_len in range(avail // 2, min_unit - 1, -1):
            if seq[i + unit_len] != seq[i]:
                continue
            unit = seq[i:i + unit_len]
            if seq.startswith(unit, i + unit_len):
                found = TandemRun(start=i, end=_extend_copies(seq, i, unit), unit=unit)
                break
        if found is None:
            i += 1
            continue
        yield found
        i = found.end


def homopolymer_runs(seq: str, min_length: int) -> Iterator[TandemRun]:
    return find_tandem_runs(seq, unit_len=1, min_copies=min_length)
