"""Sequence records and the analysis history they are kept in.

Timestamps are datetimes everywhere inside the package and are only turned
into ISO-8601 strings when a record is written out.
"""

from __future__ import annotations

import json
import logging
import os
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol, Union

from .analyzer import analyze
from .models import AnalysisDepth, AnalysisResult

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequenceRecord:
    id: str
    raw_sequence: str
    analysis_depth: AnalysisDepth
    timestamp: datetime
    result: AnalysisResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "sequence": self.raw_sequence,
            "analysis_depth": self.analysis_depth.value,
            "timestamp": self.timestamp.isoformat(),
            "result": self.result.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SequenceRecord":
        return cls(
            id=str(d["id"]),
            raw_sequence=str(d["sequence"]),
            analysis_depth=AnalysisDepth.parse(d["analysis_depth"]),
            timestamp=datetime.fromisoformat(d["timestamp"]),
            result=AnalysisResult.from_dict(d.get("result", {}) or {}),
        )


def build_record(
    sequence: str,
    depth: Union[str, AnalysisDepth],
    result: AnalysisResult,
    *,
    record_id: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> SequenceRecord:
    return SequenceRecord(
        id=record_id or uuid.uuid4().hex,
        raw_sequence=sequence,
        analysis_depth=AnalysisDepth.parse(depth),
        timestamp=timestamp or datetime.now(timezone.utc),
        result=result,
    )


class HistoryStore(Protocol):
    """Where submitted records live between sessions."""

    def save(self, record: SequenceRecord) -> None:
        ...

    def list(self) -> List[SequenceRecord]:
        ...

    def remove(self, record_id: str) -> bool:
        ...


class JsonHistoryStore:
    """History kept as a JSON list in a single file, newest record first."""

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> List[Dict[str, Any]]:
        if not os.path.exists(self.path):
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"History file {self.path} is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise ValueError(f"History file {self.path} must hold a JSON list.")
        return data

    def _dump(self, rows: List[Dict[str, Any]]) -> None:
        parent = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(rows, f, indent=2)

    def save(self, record: SequenceRecord) -> None:
        rows = [r for r in self._load() if r.get("id") != record.id]
        self._dump([record.to_dict()] + rows)
        log.debug("Saved record %s to %s", record.id, self.path)

    def list(self) -> List[SequenceRecord]:
        return [SequenceRecord.from_dict(r) for r in self._load()]

    def remove(self, record_id: str) -> bool:
        rows = self._load()
        kept = [r for r in rows if r.get("id") != record_id]
        if len(kept) == len(rows):
            return False
        self._dump(kept)
        log.debug("Removed record %s from %s", record_id, self.path)
        return True

    def current(self) -> Optional[SequenceRecord]:
        records = self.list()
        return records[0] if records else None


def submit(
    sequence: str,
    depth: Union[str, AnalysisDepth] = AnalysisDepth.BASIC,
    store: Optional[HistoryStore] = None,
) -> SequenceRecord:
    """Analyse one sequence, wrap it in a record and save it when a store is given."""
    result = analyze(sequence, depth)
    record = build_record(sequence, depth, result)
    if store is not None:
        store.save(record)
    return record
