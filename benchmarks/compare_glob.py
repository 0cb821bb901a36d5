from __future__ import annotations

import argparse
from datetime import datetime
import glob as stdlib_glob
import json
import os
from pathlib import Path
import statistics
import tempfile
import time
import tracemalloc
from dataclasses import dataclass
from typing import Callable

from globx import Globber


@dataclass
class CaseResult:
    backend: str
    case: str
    matches: int
    seconds_mean: float
    seconds_min: float
    seconds_max: float
    peak_kib_mean: float


def _run_with_memory(fn: Callable[[], list[str]]) -> tuple[float, float, int]:
    tracemalloc.start()
    start = time.perf_counter()
    matches = fn()
    elapsed = time.perf_counter() - start
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return elapsed, peak / 1024.0, len(matches)


def build_tree(root: str, fanout: int, depth: int, files_per_dir: int) -> None:
    """Create a balanced tree of *fanout*^*depth* leaf directories."""
    frontier = [root]
    for _ in range(depth):
        next_frontier = []
        for parent in frontier:
            for i in range(fanout):
                child = os.path.join(parent, f"d{i}")
                os.mkdir(child)
                next_frontier.append(child)
        frontier = next_frontier
    for dirpath, _dirnames, _filenames in os.walk(root):
        for i in range(files_per_dir):
            ext = "py" if i % 2 else "txt"
            with open(os.path.join(dirpath, f"f{i}.{ext}"), "wb"):
                pass


def run_case(
    backend: str,
    case: str,
    fn: Callable[[], list[str]],
    repeat: int,
    warmup: int,
) -> CaseResult:
    for _ in range(warmup):
        fn()

    elapsed_list: list[float] = []
    peak_list: list[float] = []
    matches = 0
    for _ in range(repeat):
        elapsed, peak_kib, matches = _run_with_memory(fn)
        elapsed_list.append(elapsed)
        peak_list.append(peak_kib)

    return CaseResult(
        backend=backend,
        case=case,
        matches=matches,
        seconds_mean=statistics.mean(elapsed_list),
        seconds_min=min(elapsed_list),
        seconds_max=max(elapsed_list),
        peak_kib_mean=statistics.mean(peak_list),
    )


def _fmt_ms(seconds: float) -> str:
    return f"{seconds * 1000.0:.2f}"


def _fmt_kib(peak_kib: float) -> str:
    return f"{peak_kib:.1f}"


def print_table(results: list[CaseResult]) -> None:
    print("| Case | Backend | matches | mean(ms) | min(ms) | max(ms) | peak KiB (mean) |")
    print("|---|---:|---:|---:|---:|---:|---:|")
    for r in results:
        print(
            f"| {r.case} | {r.backend} | {r.matches} | {_fmt_ms(r.seconds_mean)} |"
            f" {_fmt_ms(r.seconds_min)} | {_fmt_ms(r.seconds_max)} | {_fmt_kib(r.peak_kib_mean)} |"
        )


def _resolve_output_path(raw: str) -> Path:
    if raw != "auto":
        return Path(raw)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = Path("benchmarks") / "results"
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir / f"benchmark_{ts}.json"


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark globx vs the standard library's recursive glob"
    )
    parser.add_argument("--repeat", type=int, default=5)
    parser.add_argument("--warmup", type=int, default=1)
    parser.add_argument("--fanout", type=int, default=4)
    parser.add_argument("--depth", type=int, default=4)
    parser.add_argument("--files-per-dir", type=int, default=6)
    parser.add_argument("--workers", type=int, default=8)
    parser.add_argument("--json", action="store_true")
    parser.add_argument(
        "--save-json", default="", help="Save json report path (or 'auto')"
    )
    args = parser.parse_args()

    results: list[CaseResult] = []
    with tempfile.TemporaryDirectory() as td:
        build_tree(td, args.fanout, args.depth, args.files_per_dir)
        sequential = Globber()
        threaded = Globber(max_workers=args.workers)
        cases = {
            "all_py": os.path.join(td, "**", "*.py"),
            "nested_marker": os.path.join(td, "**", "d1", "**", "*.txt"),
            "everything": os.path.join(td, "d0", "**"),
        }
        for case, pattern in cases.items():
            results.append(
                run_case(
                    "globx",
                    case,
                    lambda p=pattern: sequential.glob(p),
                    args.repeat,
                    args.warmup,
                )
            )
            results.append(
                run_case(
                    f"globx(max_workers={args.workers})",
                    case,
                    lambda p=pattern: threaded.glob(p),
                    args.repeat,
                    args.warmup,
                )
            )
            results.append(
                run_case(
                    "glob.glob(recursive=True)",
                    case,
                    lambda p=pattern: stdlib_glob.glob(p, recursive=True),
                    args.repeat,
                    args.warmup,
                )
            )

    if args.json:
        print(json.dumps([r.__dict__ for r in results], indent=2))
    else:
        print_table(results)

    if args.save_json:
        out = _resolve_output_path(args.save_json)
        out.write_text(json.dumps([r.__dict__ for r in results], indent=2), encoding="utf-8")
        print(f"Saved JSON report: {out}")


if __name__ == "__main__":
    main()
