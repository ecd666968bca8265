import json
from datetime import datetime, timezone

import pytest

from seqdefect import AnalysisDepth, analyze
from seqdefect.records import JsonHistoryStore, SequenceRecord, build_record, submit


def _record(seq="ATGCGCATAAAAAAAA", record_id=None, ts=None):
    return build_record(seq, "comprehensive", analyze(seq, "comprehensive"), record_id=record_id, timestamp=ts)


def test_build_record_defaults():
    rec = _record()
    assert len(rec.id) == 32
    assert rec.analysis_depth is AnalysisDepth.COMPREHENSIVE
    assert rec.timestamp.tzinfo is not None
    assert rec.raw_sequence == "ATGCGCATAAAAAAAA"


def test_record_survives_serialisation():
    rec = _record(record_id="r1", ts=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc))
    d = rec.to_dict()
    assert d["timestamp"] == "2024-05-01T12:30:00+00:00"
    assert SequenceRecord.from_dict(json.loads(json.dumps(d))) == rec


def test_history_is_newest_first(tmp_path):
    store = JsonHistoryStore(str(tmp_path / "history.json"))
    assert store.list() == []
    assert store.current() is None

    first = _record(record_id="a")
    second = _record(seq="GGGGGGGGGG", record_id="b")
    store.save(first)
    store.save(second)
    assert [r.id for r in store.list()] == ["b", "a"]
    assert store.current().id == "b"


def test_history_remove(tmp_path):
    store = JsonHistoryStore(str(tmp_path / "history.json"))
    store.save(_record(record_id="a"))
    store.save(_record(record_id="b"))
    assert store.remove("b") is True
    assert store.remove("zzz") is False
    assert store.current().id == "a"


def test_saving_same_id_replaces(tmp_path):
    store = JsonHistoryStore(str(tmp_path / "history.json"))
    store.save(_record(record_id="a"))
    store.save(_record(seq="CCCCCCCCCC", record_id="a"))
    recs = store.list()
    assert len(recs) == 1
    assert recs[0].raw_sequence == "CCCCCCCCCC"


def test_malformed_history_raises(tmp_path):
    path = tmp_path / "history.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        JsonHistoryStore(str(path)).list()
    path.write_text('{"id": "x"}', encoding="utf-8")
    with pytest.raises(ValueError):
        JsonHistoryStore(str(path)).list()


def test_submit_saves_to_store(tmp_path):
    store = JsonHistoryStore(str(tmp_path / "h" / "history.json"))
    rec = submit("AAAAAAAAAA", "basic", store=store)
    assert store.current() == rec
    assert rec.result == analyze("AAAAAAAAAA", "basic")
