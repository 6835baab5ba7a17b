"""
Command-line front end.

Usage:
    graphclass check NAME [NAME ...] [--input-dir DIR] [--output-dir DIR] [--shape] [--draw PNG]
    graphclass bench NAME [NAME ...] [--input-dir DIR] [--log-dir DIR] [--repeats N]
    graphclass selftest [--input-dir DIR] [--output-dir DIR]

Input files hold one edge 'u w' or one isolated vertex 'u' per line.
Directories default to $GRAPHCLASS_INPUT_DIR, $GRAPHCLASS_OUTPUT_DIR and
$GRAPHCLASS_LOG_DIR, or input/, output/ and log/.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Sequence

from graphclass.bench.timing import BENCH_REPEATS, time_recompute, write_timing
from graphclass.io.edgelist import INPUT_DIR, ResourceOpenError, load_edgelist
from graphclass.io.report import OUTPUT_DIR, format_report, open_sink, write_report
from graphclass.properties.predicates import classify
from graphclass.utils.naming import describe_graph
from graphclass.viz.draw import draw_classified

LOG_DIR = os.environ.get("GRAPHCLASS_LOG_DIR", "log")

SELFTEST_FILES = [
    "is-tree.txt",
    "ac-err.txt",
    "sub-err.txt",
    "ac-sub-err.txt",
    "ac-sub-exp1-err.txt",
    "ac-sub-exp2-err.txt",
]


def check_graph(
    name: str,
    *,
    input_dir: str = INPUT_DIR,
    output_dir: str = OUTPUT_DIR,
    shape: bool = False,
    draw: str | None = None,
) -> Path:
    """Classify one stored graph and write its report; return the report path."""
    graph = load_edgelist(name, input_dir)
    props, diagnostics = classify(graph)
    text = format_report(props, diagnostics, shape=describe_graph(graph) if shape else None)
    path = write_report(name, text, output_dir)
    if draw:
        draw_classified(graph, props=props, save_path=draw)
    return path


def run_check(names: Sequence[str], **kwargs) -> int:
    """Check each graph in turn; a failure is reported and the rest still run."""
    status = 0
    for name in names:
        try:
            path = check_graph(name, **kwargs)
        except ResourceOpenError as exc:
            print(f"Error while checking graph from '{name}': {exc}", file=sys.stderr)
            status = 1
            continue
        print(f"Success!\nResults were written to {path}")
    return status


def run_bench(
    names: Sequence[str],
    *,
    input_dir: str = INPUT_DIR,
    log_dir: str = LOG_DIR,
    repeats: int = BENCH_REPEATS,
) -> int:
    """
    Classify each graph once into <log_dir>/result.txt, then time
    *repeats* full recomputations into <log_dir>/log.txt.
    """
    status = 0
    timed = 0
    log_path = Path(log_dir) / "log.txt"
    try:
        with open_sink(Path(log_dir) / "result.txt") as res, open_sink(log_path) as log:
            for name in names:
                try:
                    graph = load_edgelist(name, input_dir)
                except ResourceOpenError as exc:
                    print(f"Error while timing graph from '{name}': {exc}", file=sys.stderr)
                    status = 1
                    continue
                props, diagnostics = classify(graph)
                res.write(f"# {name}\n")
                res.write(format_report(props, diagnostics))
                log.write(f"# {name}\n")
                write_timing(time_recompute(graph, repeats), log)
                timed += 1
    except ResourceOpenError as exc:
        print(f"Error while timing graphs: {exc}", file=sys.stderr)
        return 1
    if timed:
        print(f"Success!\nResults were written to {log_path}")
    return status


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="graphclass",
        description="Classify undirected graphs as trees and numbered trees.",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    p_check = sub.add_parser("check", help="classify graphs and write one report per graph")
    p_check.add_argument("names", nargs="+", help="file names under the input directory")
    p_check.add_argument("--input-dir", default=INPUT_DIR)
    p_check.add_argument("--output-dir", default=OUTPUT_DIR)
    p_check.add_argument("--shape", action="store_true", help="prepend a shape description")
    p_check.add_argument("--draw", metavar="PNG", default=None, help="save a drawing (single graph only)")

    p_bench = sub.add_parser("bench", help="time repeated classification")
    p_bench.add_argument("names", nargs="+")
    p_bench.add_argument("--input-dir", default=INPUT_DIR)
    p_bench.add_argument("--log-dir", default=LOG_DIR)
    p_bench.add_argument("--repeats", type=int, default=BENCH_REPEATS)

    p_self = sub.add_parser("selftest", help="check the bundled sample graphs")
    p_self.add_argument("--input-dir", default=INPUT_DIR)
    p_self.add_argument("--output-dir", default=OUTPUT_DIR)

    return ap


def main(argv: List[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "check":
        if args.draw and len(args.names) != 1:
            ap.error("--draw needs exactly one graph name.")
        return run_check(
            args.names,
            input_dir=args.input_dir,
            output_dir=args.output_dir,
            shape=args.shape,
            draw=args.draw,
        )
    if args.command == "bench":
        if args.repeats < 1:
            ap.error("--repeats must be >= 1.")
        return run_bench(args.names, input_dir=args.input_dir, log_dir=args.log_dir, repeats=args.repeats)
    return run_check(SELFTEST_FILES, input_dir=args.input_dir, output_dir=args.output_dir)


if __name__ == "__main__":
    sys.exit(main())
