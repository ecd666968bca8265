from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional

from .analyzer import analyze
from .generator import generate_synthetic_sequence
from .io_fasta import write_fasta
from .models import AnalysisDepth, AnalysisResult
from .pipeline import run_pipeline
from .records import JsonHistoryStore

DEPTHS = [d.value for d in AnalysisDepth]


def _print_result(result: AnalysisResult) -> None:
    m = result.metrics
    print(f"GC content: {m.gc_content * 100:.1f}%  GC/AT ratio: {m.at_gc_ratio:.2f}  repeats: {m.repeat_count}")
    if not result.defects:
        print("No defects found.")
        return
    print(f"{'kind':<16}{'pos':>6}{'span':>6}  {'severity':<8}  description")
    for d in result.defects:
        print(f"{d.kind.value:<16}{d.position:>6}{d.span:>6}  {d.severity.value:<8}  {d.description}")


def _cmd_analyze(args) -> int:
    result = analyze(args.sequence, args.depth)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        _print_result(result)
    return 0


def _cmd_generate(args) -> int:
    seq = generate_synthetic_sequence(length=args.length, defect_count=args.defects, seed=args.seed)
    if args.out:
        write_fasta(args.out, [(args.id, seq)])
    else:
        print(seq)
    return 0


def _cmd_history(args) -> int:
    store = JsonHistoryStore(args.path)
    if args.history_cmd == "list":
        for rec in store.list():
            n = len(rec.result.defects)
            print(f"{rec.id}\t{rec.timestamp.isoformat()}\t{rec.analysis_depth.value}\t{len(rec.raw_sequence)} nt\t{n} defect(s)")
        return 0
    if not store.remove(args.record_id):
        print(f"No record with id {args.record_id}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="seqdefect", description="Heuristic defect scanning for nucleotide sequences.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    run = sub.add_parser("run", help="Analyse every sequence named in a YAML config.")
    run.add_argument("config", help="Path to YAML config.")
    run.add_argument("--outdir", default="out", help="Output directory.")

    an = sub.add_parser("analyze", help="Analyse one sequence given on the command line.")
    an.add_argument("sequence")
    an.add_argument("--depth", default=AnalysisDepth.BASIC.value, choices=DEPTHS)
    an.add_argument("--json", action="store_true", help="Print the result as JSON.")

    gen = sub.add_parser("generate", help="Generate a synthetic demo sequence.")
    gen.add_argument("--length", type=int, default=200)
    gen.add_argument("--defects", type=int, default=5, help="Number of anomaly types to plant (0-5).")
    gen.add_argument("--seed", type=int, default=None)
    gen.add_argument("--out", default=None, help="Write a FASTA file instead of printing.")
    gen.add_argument("--id", default="synthetic", help="FASTA record id.")

    hist = sub.add_parser("history", help="Inspect or edit a saved analysis history.")
    hist_sub = hist.add_subparsers(dest="history_cmd", required=True)
    ls = hist_sub.add_parser("list")
    ls.add_argument("--path", required=True, help="History JSON file.")
    rm = hist_sub.add_parser("remove")
    rm.add_argument("--path", required=True, help="History JSON file.")
    rm.add_argument("record_id")

    args = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.cmd == "run":
        run_pipeline(args.config, args.outdir)
        return 0
    if args.cmd == "analyze":
        return _cmd_analyze(args)
    if args.cmd == "generate":
        return _cmd_generate(args)
    return _cmd_history(args)


if __name__ == "__main__":
    sys.exit(main())
