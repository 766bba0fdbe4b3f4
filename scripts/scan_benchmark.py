"""스트리밍 스캔 벤치마크 및 메모리 측정./Benchmark streaming scan with memory profile."""

from __future__ import annotations

import argparse
import tracemalloc
from pathlib import Path
from time import perf_counter

from core.config import ScanConfiguration
from src.scanner import ProgressEvent, ScanStatistics, stream_repository
from src.sinks import OUTPUT_EXTENSIONS, open_sink


def _format_float(value: float) -> str:
    """소수점 둘째 자리까지 포맷./Format float to two decimals."""

    return f"{value:.2f}"


def _print_progress(event: ProgressEvent) -> None:
    """진행 상황을 출력합니다./Print progress updates."""

    eta = "?" if event.stats.eta_seconds is None else _format_float(event.stats.eta_seconds)
    path = event.current_path or "-"
    print(
        f"processed={event.stats.processed} "
        f"skipped={event.stats.skipped} "
        f"elapsed={_format_float(event.stats.elapsed_seconds)}s "
        f"eta={eta}s path={path}",
        flush=True,
    )


def run_benchmark(
    root: Path,
    out_dir: Path,
    format_name: str = "json",
    *,
    quiet: bool = False,
) -> ScanStatistics:
    """벤치마크 스캔을 실행합니다./Execute a benchmark scan and print a summary."""

    config = ScanConfiguration()
    output_path = out_dir / f"benchmark{OUTPUT_EXTENSIONS[format_name]}"
    tracemalloc.start()
    started = perf_counter()
    with open_sink(format_name, output_path, config) as sink:
        stats, errors = stream_repository(
            root, sink, config, progress_callback=None if quiet else _print_progress
        )
    elapsed = perf_counter() - started
    _current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    print(
        "SUMMARY",
        f"duration={_format_float(elapsed)}s",
        f"files={stats.total_files}",
        f"errors={len(errors)}",
        f"peak_mb={_format_float(peak / (1024 * 1024))}",
        sep=" ",
    )
    return stats


def main() -> None:
    """CLI 진입점./CLI entry point."""

    parser = argparse.ArgumentParser(description="Stream scan benchmark")
    parser.add_argument("root", type=Path, help="directory to scan")
    parser.add_argument("--out", type=Path, default=Path(".cache"), help="output directory")
    parser.add_argument("--format", default="json", choices=["xml", "json", "markdown"])
    args = parser.parse_args()
    run_benchmark(args.root.resolve(), args.out.resolve(), args.format)


if __name__ == "__main__":
    main()
