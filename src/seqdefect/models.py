from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple, Union


class DefectKind(str, Enum):
    FRAMESHIFT = "Frameshift"
    UNUSUAL_REPEAT = "Repeat"
    DIRECT_REPEAT = "DirectRepeat"
    TRIPLET_REPEAT = "TripletRepeat"
    NON_STANDARD_BASE = "NonStandardBase"
    HIGH_GC_CONTENT = "HighGCContent"
    LOW_GC_CONTENT = "LowGCContent"
    HOMOPOLYMER = "Homopolymer"
    RATIO_IMBALANCE = "RatioImbalance"
    PALINDROME = "Palindrome"


class Severity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.LOW: 0, Severity.MEDIUM: 1, Severity.HIGH: 2}


class AnalysisDepth(str, Enum):
    BASIC = "basic"
    COMPREHENSIVE = "comprehensive"

    @classmethod
    def parse(cls, value: Union[str, "AnalysisDepth"]) -> "AnalysisDepth":
        """Accept an AnalysisDepth or its case-insensitive name ('basic', 'COMPREHENSIVE')."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for depth in cls:
            if depth.value == key:
                return depth
        allowed = ", ".join(d.value for d in cls)
        raise ValueError(f"Unknown analysis depth '{value}'. Expected one of: {allowed}.")


@dataclass(frozen=True)
class Defect:
    """A located anomaly reported by one detector."""

    kind: DefectKind
    position: int  # 0-based, into the uppercased sequence
    span: int
    severity: Severity
    description: str

    @property
    def end(self) -> int:
        return self.position + self.span

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "position": self.position,
            "span": self.span,
            "severity": self.severity.value,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Defect":
        return cls(
            kind=DefectKind(d["kind"]),
            position=int(d["position"]),
            span=int(d["span"]),
            severity=Severity(d["severity"]),
            description=str(d.get("description", "")),
        )


@dataclass(frozen=True)
class Metrics:
    gc_content: float
    at_gc_ratio: float  # (G+C)/(A+T), 0.0 when there is no A or T
    repeat_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gc_content": self.gc_content,
            "at_gc_ratio": self.at_gc_ratio,
            "repeat_count": self.repeat_count,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Metrics":
        return cls(
            gc_content=float(d.get("gc_content", 0.0)),
            at_gc_ratio=float(d.get("at_gc_ratio", 0.0)),
            repeat_count=int(d.get("repeat_count", 0)),
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Defects in detector invocation order, plus whole-sequence metrics."""

    defects: Tuple[Defect, ...]
    metrics: Metrics

    def count_by_kind(self) -> Dict[DefectKind, int]:
        return dict(Counter(d.kind for d in self.defects))

    def count_by_severity(self) -> Dict[Severity, int]:
        counts = Counter(d.severity for d in self.defects)
        return {s: counts.get(s, 0) for s in Severity}

    def sorted_by_position(self) -> List[Defect]:
        # Stable, so detector order is kept for ties.
        return sorted(self.defects, key=lambda d: d.position)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "defects": [d.to_dict() for d in self.defects],
            "metrics": self.metrics.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "AnalysisResult":
        return cls(
            defects=tuple(Defect.from_dict(x) for x in (d.get("defects", []) or [])),
            metrics=Metrics.from_dict(d.get("metrics", {}) or {}),
        )
