from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Tuple

from .analyzer import analyze
from .config import analysis_depth, history_path, load_config, log_level, output_name, resolve_path
from .io_fasta import read_fasta
from .records import JsonHistoryStore, SequenceRecord, build_record
from .report import DEFECT_HEADER, METRICS_HEADER, defect_rows, metrics_row, write_tsv, write_workbook

log = logging.getLogger(__name__)


def collect_sequences(cfg: Dict[str, Any], workdir: str) -> List[Tuple[str, str]]:
    """(id, sequence) pairs from inputs.fasta then inputs.sequences, in file/mapping order."""
    inputs = cfg.get("inputs", {}) or {}
    out: List[Tuple[str, str]] = []

    fasta_in = inputs.get("fasta")
    if fasta_in:
        for rec in read_fasta(resolve_path(str(fasta_in), workdir)):
            out.append((rec.id, rec.seq))

    inline = inputs.get("sequences", {}) or {}
    if not isinstance(inline, dict):
        raise ValueError("inputs.sequences must be a mapping of id -> sequence.")
    for seq_id, seq in inline.items():
        if seq is None or not str(seq).strip():
            raise ValueError(f"inputs.sequences.{seq_id} is empty.")
        out.append((str(seq_id), str(seq).strip()))

    ids = [i for i, _ in out]
    dupes = sorted({i for i in ids if ids.count(i) > 1})
    if dupes:
        raise ValueError(f"Duplicate sequence ids across inputs: {dupes}")
    if not out:
        raise ValueError("inputs.fasta or inputs.sequences is required.")
    return out


def run_pipeline(config_path: str, outdir: str) -> List[SequenceRecord]:
    cfg = load_config(config_path)
    os.makedirs(outdir, exist_ok=True)
    if cfg.get("logging"):
        logging.getLogger("seqdefect").setLevel(log_level(cfg))

    # Relative inputs are resolved against the config directory
    workdir = os.path.dirname(os.path.abspath(config_path)) or "."

    depth = analysis_depth(cfg)
    sequences = collect_sequences(cfg, workdir)
    log.info("Analysing %d sequence(s) at %s depth", len(sequences), depth.value)

    hist = history_path(cfg, workdir)
    store = JsonHistoryStore(hist) if hist else None

    records: List[SequenceRecord] = []
    all_defects: List[Dict[str, str]] = []
    all_metrics: List[Dict[str, str]] = []

    for seq_id, seq in sequences:
        record = build_record(seq, depth, analyze(seq, depth))
        records.append(record)
        all_defects += defect_rows(seq_id, record)
        all_metrics.append(metrics_row(seq_id, record))
        log.info("%s: %d nt, %d defect(s)", seq_id, len(seq), len(record.result.defects))
        if store is not None:
            store.save(record)

    write_tsv(os.path.join(outdir, output_name(cfg, "defects_tsv")), all_defects, DEFECT_HEADER)
    write_tsv(os.path.join(outdir, output_name(cfg, "metrics_tsv")), all_metrics, METRICS_HEADER)

    workbook = output_name(cfg, "workbook")
    if workbook:
        write_workbook(os.path.join(outdir, workbook), all_defects, all_metrics)

    return records
