import pytest

from seqdefect import compute_metrics
from seqdefect.scan import find_repeat_blocks, find_tandem_runs


def test_empty_sequence_is_all_zero():
    m = compute_metrics("")
    assert m.gc_content == 0
    assert m.at_gc_ratio == 0
    assert m.repeat_count == 0


def test_gc_content_and_ratio():
    m = compute_metrics("ATGCNN")
    assert m.gc_content == pytest.approx(2 / 6)
    assert m.at_gc_ratio == pytest.approx(1.0)


def test_ratio_floor_without_a_or_t():
    m = compute_metrics("GGGCCC")
    assert m.gc_content == 1.0
    assert m.at_gc_ratio == 0.0


def test_lowercase_counts_the_same():
    assert compute_metrics("atgcgc") == compute_metrics("ATGCGC")


def test_repeat_count_prefers_longest_block():
    # ATG x2, then CCCTTT x2 (the 6-nt block wins over CCC/TTT)
    assert compute_metrics("ATGATGCCCTTTCCCTTT").repeat_count == 2
    blocks = list(find_repeat_blocks("ATGATGCCCTTTCCCTTT"))
    assert [(b.start, b.end, b.unit) for b in blocks] == [(0, 6, "ATG"), (6, 18, "CCCTTT")]


def test_repeat_count_homopolymer_is_one_block():
    assert compute_metrics("AAAAAAAAAA").repeat_count == 1


def test_repeat_blocks_stop_at_non_standard_symbols():
    assert compute_metrics("ATGNATG").repeat_count == 0
    assert compute_metrics("ATGATGNATGATG").repeat_count == 2


def test_tandem_runs_are_greedy_and_non_overlapping():
    runs = list(find_tandem_runs("TTCAGCAGCAGCAGCAGTT", unit_len=3, min_copies=4))
    assert len(runs) == 1
    assert (runs[0].start, runs[0].length, runs[0].unit, runs[0].copies) == (2, 15, "CAG", 5)
