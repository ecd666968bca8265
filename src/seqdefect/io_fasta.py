from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from Bio import SeqIO

FASTA_WIDTH = 80


@dataclass(frozen=True)
class FastaRecord:
    id: str
    description: str
    seq: str


def read_fasta(path: str) -> List[FastaRecord]:
    """Read every record of a FASTA file; record ids must be unique."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"FASTA input not found: {path}")

    recs: List[FastaRecord] = []
    seen = set()
    for r in SeqIO.parse(path, "fasta"):
        if r.id in seen:
            raise ValueError(f"Duplicate FASTA record id '{r.id}' in {path}")
        seen.add(r.id)
        recs.append(FastaRecord(id=r.id, description=r.description, seq=str(r.seq)))
    if not recs:
        raise ValueError(f"No FASTA records found: {path}")
    return recs


def write_fasta(path: str, entries: Iterable[Tuple[str, str]]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for header, seq in entries:
            f.write(f">{header}\n")
            for i in range(0, len(seq), FASTA_WIDTH):
                f.write(seq[i:i + FASTA_WIDTH] + "\n")
