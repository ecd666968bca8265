import json

import pytest

from seqdefect.cli import main
from seqdefect.generator import generate_synthetic_sequence
from seqdefect.io_fasta import read_fasta
from seqdefect.records import JsonHistoryStore, submit


def test_analyze_json(capsys):
    assert main(["analyze", "aaaaaaaaaa", "--depth", "comprehensive", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["metrics"]["gc_content"] == 0
    assert payload["defects"][-1] == {
        "kind": "Homopolymer",
        "position": 0,
        "span": 10,
        "severity": "High",
        "description": "Long stretch of A nucleotides (length: 10).",
    }


def test_analyze_table(capsys):
    assert main(["analyze", "ATGCGC"]) == 0
    out = capsys.readouterr().out
    assert "GC content: 66.7%" in out
    assert "No defects found." in out


def test_generate_is_reproducible(capsys, tmp_path):
    assert main(["generate", "--length", "60", "--seed", "5"]) == 0
    assert capsys.readouterr().out.strip() == generate_synthetic_sequence(60, 5, seed=5)

    out = tmp_path / "demo.fasta"
    assert main(["generate", "--length", "60", "--seed", "5", "--out", str(out), "--id", "demo"]) == 0
    recs = read_fasta(str(out))
    assert recs[0].id == "demo"
    assert recs[0].seq == generate_synthetic_sequence(60, 5, seed=5)


def test_history_commands(capsys, tmp_path):
    path = str(tmp_path / "history.json")
    rec = submit("ATGCATGCAT", "basic", store=JsonHistoryStore(path))

    assert main(["history", "list", "--path", path]) == 0
    assert rec.id in capsys.readouterr().out

    assert main(["history", "remove", rec.id, "--path", path]) == 0
    assert main(["history", "remove", rec.id, "--path", path]) == 1
    assert JsonHistoryStore(path).list() == []


def test_history_path_is_required(tmp_path):
    with pytest.raises(SystemExit):
        main(["history", "list"])
