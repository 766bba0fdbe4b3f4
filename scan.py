"""파일 시스템 스캔 단계를 제공합니다./Provide repository scan entry points."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, TextIO

from core.config import ScanConfiguration
from core.errors import PipelineError
from src.scanner import (
    FileRecord,
    ProgressEvent,
    ScanError,
    ScanResult,
    ScanStatistics,
    check_root,
    scan_repository,
    stream_repository,
)
from src.sinks import EmissionSink, create_sink, open_sink

LOGGER = logging.getLogger("src.scan")


def scan_path(
    path: Path | str,
    config: ScanConfiguration | None = None,
    *,
    count_first: bool = False,
    progress_callback: Callable[[ProgressEvent], None] | None = None,
) -> ScanResult:
    """경로를 배치 모드로 스캔합니다./Scan a repository in batch mode."""

    return scan_repository(
        path, config, count_first=count_first, progress_callback=progress_callback
    )


def replay_result(result: ScanResult, sink: EmissionSink, config: ScanConfiguration) -> None:
    """배치 결과를 싱크 순서대로 재생./Replay a batch result through the sink sequence."""

    sink.write_header(result.repo_path, result.scan_time)
    if config.include_directory_tree:
        sink.write_tree(result.relative_paths())
    for record in result.files:
        sink.write_file(record)
    sink.write_footer(result.statistics)


def emit_scan(
    result: ScanResult,
    out_path: Path,
    format_name: str = "xml",
    config: ScanConfiguration | None = None,
) -> None:
    """스캔 결과를 파일로 저장합니다./Persist a batch result to disk."""

    config = config or ScanConfiguration()
    with open_sink(format_name, out_path, config) as sink:
        replay_result(result, sink, config)


def stream_to(
    path: Path | str,
    stream: TextIO,
    format_name: str = "xml",
    config: ScanConfiguration | None = None,
) -> tuple[ScanStatistics, list[ScanError]]:
    """호출자 스트림으로 스트리밍 스캔./Stream a scan into a caller-owned text stream."""

    sink = create_sink(format_name, stream, config)
    try:
        return stream_repository(path, sink, config)
    finally:
        sink.close()


def run_scan_to_file(
    path: Path | str,
    output_path: Path,
    format_name: str = "xml",
    config: ScanConfiguration | None = None,
) -> tuple[ScanStatistics, list[ScanError]]:
    """스캔을 실행하고 파일로 기록./Run a streaming scan and persist it to a file."""

    check_root(Path(path).expanduser().absolute())
    with open_sink(format_name, output_path, config) as sink:
        statistics, errors = stream_repository(path, sink, config)
    LOGGER.info("output written", extra={"path": str(output_path)})
    return statistics, errors


def load_records(path: Path) -> list[FileRecord]:
    """JSON 출력에서 레코드를 로드합니다./Load file records from a JSON output document."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise PipelineError("invalid scan document", stage="load", path=str(path)) from exc
    items = payload.get("files") if isinstance(payload, dict) else None
    if not isinstance(items, list):
        raise PipelineError("scan document has no files array", stage="load", path=str(path))
    records: list[FileRecord] = []
    for item in items:
        records.append(
            FileRecord(
                absolute_path=item.get("path", ""),
                relative_path=item.get("relative_path", ""),
                size_bytes=int(item.get("size", 0)),
                modified_at=item.get("mod_time", ""),
                modified_display=item.get("mod_time_formatted", ""),
                language=item.get("language", ""),
                extension=item.get("extension", ""),
                is_text=bool(item.get("is_text", False)),
                content=item.get("content", ""),
                line_count=int(item.get("line_count", 0)),
            )
        )
    return records


__all__ = [
    "emit_scan",
    "load_records",
    "replay_result",
    "run_scan_to_file",
    "scan_path",
    "stream_to",
]
