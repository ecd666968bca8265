from __future__ import annotations

import os
from typing import Any, Dict, Optional

import yaml

from .models import AnalysisDepth

DEFAULT_OUTPUTS = {
    "defects_tsv": "defects.tsv",
    "metrics_tsv": "metrics.tsv",
}


def load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError("Config must be a YAML mapping.")
    return cfg


def analysis_depth(cfg: Dict[str, Any]) -> AnalysisDepth:
    analysis = cfg.get("analysis", {}) or {}
    return AnalysisDepth.parse(analysis.get("depth", AnalysisDepth.BASIC.value))


def output_name(cfg: Dict[str, Any], key: str) -> Optional[str]:
    """File name configured under outputs.<key>; TSV outputs fall back to defaults, the workbook does not."""
    outputs = cfg.get("outputs", {}) or {}
    name = outputs.get(key, DEFAULT_OUTPUTS.get(key))
    return str(name) if name else None


def resolve_path(path: str, base_dir: str) -> str:
    if os.path.isabs(path):
        return path
    return os.path.join(base_dir, path)


def history_path(cfg: Dict[str, Any], base_dir: str) -> Optional[str]:
    p = (cfg.get("history", {}) or {}).get("path")
    return resolve_path(str(p), base_dir) if p else None


def log_level(cfg: Dict[str, Any], default: str = "INFO") -> str:
    level = str((cfg.get("logging", {}) or {}).get("level", default)).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"Unknown logging.level '{level}'.")
    return level
