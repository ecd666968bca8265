import pytest

from seqdefect import AnalysisDepth, DefectKind, Severity, analyze, compute_metrics
from seqdefect.generator import generate_synthetic_sequence

STANDARD = set("ATGC")

SAMPLES = [
    "",
    "A",
    "AAAAAAAAAA",
    "ATGCATGCATGCATGC",
    "XYZATGCATGC",
    "GC" * 30 + "AT" * 30,
    "CAGCAGCAGCAGCAGTTTTTTTTNNATGCGCAT",
    "N" * 40,
    "G" * 40,
    "T" * 40,
] + [generate_synthetic_sequence(length=150, defect_count=5, seed=s) for s in range(5)]


@pytest.mark.parametrize("seq", SAMPLES)
def test_gc_content_in_unit_interval(seq):
    assert 0.0 <= compute_metrics(seq).gc_content <= 1.0


@pytest.mark.parametrize("seq", SAMPLES)
def test_basic_is_prefix_of_comprehensive(seq):
    basic = analyze(seq, AnalysisDepth.BASIC)
    full = analyze(seq, AnalysisDepth.COMPREHENSIVE)
    assert full.defects[: len(basic.defects)] == basic.defects
    assert basic.metrics == full.metrics


@pytest.mark.parametrize("seq", SAMPLES)
def test_analysis_is_idempotent(seq):
    assert analyze(seq, "comprehensive") == analyze(seq, "comprehensive")


@pytest.mark.parametrize("seq", SAMPLES)
def test_findings_stay_inside_sequence(seq):
    n = len(seq)
    for d in analyze(seq, "comprehensive").defects:
        assert 0 <= d.position <= n
        assert d.span >= 0
        assert d.end <= n


@pytest.mark.parametrize("seq", SAMPLES)
def test_non_standard_count_matches_input(seq):
    found = [d for d in analyze(seq, "basic").defects if d.kind is DefectKind.NON_STANDARD_BASE]
    assert len(found) == sum(1 for c in seq.upper() if c not in STANDARD)


def test_ten_a_homopolymer():
    result = analyze("AAAAAAAAAA", AnalysisDepth.COMPREHENSIVE)
    hp = [d for d in result.defects if d.kind is DefectKind.HOMOPOLYMER]
    assert len(hp) == 1
    assert hp[0].span == 10
    assert hp[0].severity is Severity.HIGH
    assert result.metrics.gc_content == 0


def test_length_not_divisible_by_three():
    fs = [d for d in analyze("ATGCATGCATGCATGC", "basic").defects if d.kind is DefectKind.FRAMESHIFT]
    assert len(fs) >= 1
    assert fs[0].span == 1


def test_gc_rich_window_in_gattaca_background():
    seq = "GATTACA" * 2 + "GC" * 10 + "GATTACA" * 2
    result = analyze(seq, "comprehensive")
    high = [d for d in result.defects if d.kind is DefectKind.HIGH_GC_CONTENT]
    assert high
    assert all(d.severity is Severity.MEDIUM and d.span == 20 for d in high)


def test_palindrome_found_at_its_offset():
    seq = "TTTT" + "ATGCGCAT" + "TTTT"
    pal = [d for d in analyze(seq, "comprehensive").defects if d.kind is DefectKind.PALINDROME]
    assert any(d.position == 4 and d.span == 8 for d in pal)
    assert "ATGCGCAT" in next(d for d in pal if d.position == 4).description


def test_each_non_standard_symbol_reported():
    nsb = [d for d in analyze("XYZATGCATGC", "basic").defects if d.kind is DefectKind.NON_STANDARD_BASE]
    assert [d.position for d in nsb] == [0, 1, 2]
    assert all(d.severity is Severity.HIGH and d.span == 1 for d in nsb)
