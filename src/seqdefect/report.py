"""Tabular reports: TSV files and an optional Excel workbook."""

from __future__ import annotations

from typing import Dict, List, Sequence

import openpyxl

from .models import Severity
from .records import SequenceRecord

DEFECT_HEADER = ["sequence_id", "kind", "position", "span", "end", "severity", "description"]
METRICS_HEADER = [
    "sequence_id",
    "length",
    "depth",
    "gc_content",
    "at_gc_ratio",
    "repeat_count",
    "n_defects",
    "n_high",
    "n_medium",
    "n_low",
]


def defect_rows(sequence_id: str, record: SequenceRecord) -> List[Dict[str, str]]:
    return [
        {
            "sequence_id": sequence_id,
            "kind": d.kind.value,
            "position": str(d.position),
            "span": str(d.span),
            "end": str(d.end),
            "severity": d.severity.value,
            "description": d.description,
        }
        for d in record.result.defects
    ]


def metrics_row(sequence_id: str, record: SequenceRecord) -> Dict[str, str]:
    m = record.result.metrics
    sev = record.result.count_by_severity()
    return {
        "sequence_id": sequence_id,
        "length": str(len(record.raw_sequence)),
        "depth": record.analysis_depth.value,
        "gc_content": f"{m.gc_content:.4f}",
        "at_gc_ratio": f"{m.at_gc_ratio:.4f}",
        "repeat_count": str(m.repeat_count),
        "n_defects": str(len(record.result.defects)),
        "n_high": str(sev[Severity.HIGH]),
        "n_medium": str(sev[Severity.MEDIUM]),
        "n_low": str(sev[Severity.LOW]),
    }


def write_tsv(path: str, rows: List[Dict[str, str]], header: Sequence[str]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write("\t".join(header) + "\n")
        for r in rows:
            f.write("\t".join(r.get(h, "").replace("\t", " ") for h in header) + "\n")


def write_workbook(
    path: str,
    defects: List[Dict[str, str]],
    metrics: List[Dict[str, str]],
) -> None:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "defects"
    _fill_sheet(ws, defects, DEFECT_HEADER, numeric=("position", "span", "end"))
    _fill_sheet(
        wb.create_sheet("metrics"),
        metrics,
        METRICS_HEADER,
        numeric=("length", "gc_content", "at_gc_ratio", "repeat_count", "n_defects", "n_high", "n_medium", "n_low"),
    )
    wb.save(path)


def _fill_sheet(ws, rows: List[Dict[str, str]], header: Sequence[str], numeric: Sequence[str] = ()) -> None:
    ws.append(list(header))
    for r in rows:
        values = []
        for h in header:
            v = r.get(h, "")
            if h in numeric and v != "":
                v = float(v) if "." in v else int(v)
            values.append(v)
        ws.append(values)
