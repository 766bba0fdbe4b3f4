"""배치/스트리밍 스캔 실행기./Batch and streaming scan engine."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING

from core.config import ScanConfiguration
from core.timestamps import render_mtime, scan_timestamp

from utils import count_lines, display_path

from .classifier import Classification, Classifier
from .exceptions import EmissionOrderError, SinkWriteError
from .models import (
    FileHandler,
    FileRecord,
    ProgressCallback,
    ScanError,
    ScanResult,
    ScanStatistics,
    TreeWriter,
)
from .state import ScanState
from .transform import ContentTransformer
from .walker import DirectoryWalker, check_root

if TYPE_CHECKING:
    from src.sinks.base import EmissionSink

__all__ = ["ScanEngine", "scan_repository", "stream_repository"]

LOGGER = logging.getLogger(__name__)


class ScanEngine:
    """워커·분류기·변환기를 묶는 엔진./Orchestrate walker, classifier and transformer."""

    def __init__(
        self,
        root: Path | str,
        config: ScanConfiguration | None = None,
        *,
        progress_callback: ProgressCallback | None = None,
        throttle_interval: float = 0.2,
    ) -> None:
        self.root = Path(root).expanduser().absolute()
        self.config = config or ScanConfiguration()
        self.classifier = Classifier(self.config)
        self.transformer = ContentTransformer(self.config)
        self._progress_callback = progress_callback
        self._throttle_interval = throttle_interval
        self.state = self._new_state()

    def _new_state(self) -> ScanState:
        return ScanState(
            progress_callback=self._progress_callback,
            throttle_interval=self._throttle_interval,
        )

    @property
    def statistics(self) -> ScanStatistics:
        return self.state.statistics

    @property
    def errors(self) -> list[ScanError]:
        return self.state.errors

    def _walker(self, *, record_errors: bool) -> DirectoryWalker:
        report = self._report_walk_error if record_errors else None
        return DirectoryWalker(
            self.root,
            self.config.excluded_directory_names,
            self.config.included_extensions,
            report,
        )

    def _report_walk_error(self, path: Path, phase: str, error: OSError) -> None:
        self.state.record_error(path, phase, error, skipped=True)

    def relative_path(self, path: Path) -> str:
        """루트 기준 슬래시 경로./Root-relative path with forward slashes."""

        try:
            return display_path(path.relative_to(self.root).as_posix())
        except ValueError:
            return display_path(path.as_posix())

    def collect_paths(self) -> list[str]:
        """트리용 경로 수집(내용은 읽지 않음)./Collect sorted relative paths, metadata only."""

        paths = [self.relative_path(path) for path in self._walker(record_errors=False).iter_files()]
        paths.sort()
        return paths

    def count_files(self) -> int:
        """진행률 추정용 사전 집계./Counting pre-pass for progress estimation."""

        return sum(1 for _ in self._walker(record_errors=False).iter_files())

    def build_record(self, path: Path) -> FileRecord | None:
        """파일 레코드 생성, stat 실패 시 None./Build one record; None when stat fails."""

        try:
            stat_result = path.stat()
        except OSError as exc:
            self.state.record_error(path, "stat", exc, skipped=True)
            return None
        modified_at, modified_display = render_mtime(stat_result.st_mtime)
        classification = self.classifier.classify_path(path)
        record = FileRecord(
            absolute_path=display_path(path),
            relative_path=self.relative_path(path),
            size_bytes=int(stat_result.st_size),
            modified_at=modified_at,
            modified_display=modified_display,
            language=classification.language_tag,
            extension=display_path(path.suffix.lower()),
            is_text=classification.is_text,
        )
        if self.config.include_content:
            self._attach_content(path, record, classification)
        return record

    def _attach_content(self, path: Path, record: FileRecord, fast: Classification) -> None:
        try:
            with path.open("rb") as handle:
                head = handle.read(self.config.sniff_bytes)
                refined = self.classifier.refine(fast, head)
                if not refined.is_text:
                    record.is_text = False
                    record.language = refined.language_tag
                    return
                data = head + handle.read()
        except OSError as exc:
            self.state.record_error(path, "read", exc, skipped=False)
            return
        record.is_text = True
        record.language = refined.language_tag
        text = data.decode("utf-8", errors="replace")
        if self.transformer.enabled:
            text = self.transformer.process(text, refined.language)
        record.content = text
        record.line_count = count_lines(text)

    def _tick(self, path: Path) -> None:
        now = time.perf_counter()
        self.state.current_path = display_path(path)
        if self.state.should_emit_progress(now):
            self.state.emit_progress(now)

    def scan(self, *, count_first: bool = False) -> ScanResult:
        """배치 모드: 전체 레코드를 메모리에 모읍니다./Batch mode, materialise every record."""

        check_root(self.root)
        self.state = self._new_state()
        result = ScanResult(repo_path=display_path(self.root), scan_time=scan_timestamp())
        LOGGER.info("batch scan started", extra={"path": display_path(self.root)})
        if count_first:
            self.state.discovered = self.count_files()
        for path in self._walker(record_errors=True).iter_files():
            record = self.build_record(path)
            if record is None:
                continue
            self.state.record_file(record)
            result.files.append(record)
            self._tick(path)
        result.files.sort(key=lambda item: item.relative_path)
        result.statistics = self.state.statistics
        result.errors = self.state.errors
        self.state.current_path = None
        self.state.emit_progress(time.perf_counter())
        LOGGER.info(
            "batch scan finished: %d files",
            result.total_files,
            extra={"path": display_path(self.root)},
        )
        return result

    def stream(
        self,
        handle_file: FileHandler,
        *,
        tree_writer: TreeWriter | None = None,
    ) -> ScanStatistics:
        """스트리밍 모드: 파일마다 콜백 후 폐기./Streaming mode, hand off each record and drop it."""

        check_root(self.root)
        self.state = self._new_state()
        LOGGER.info("streaming scan started", extra={"path": display_path(self.root)})
        if self.config.include_directory_tree and tree_writer is not None:
            paths = self.collect_paths()
            try:
                tree_writer(paths)
            except EmissionOrderError:
                raise
            except Exception as exc:
                raise SinkWriteError(
                    display_path(self.root), self.state.statistics.copy(), list(self.state.errors)
                ) from exc
        for path in self._walker(record_errors=True).iter_files():
            record = self.build_record(path)
            if record is None:
                continue
            self.state.record_file(record)
            try:
                handle_file(record)
            except EmissionOrderError:
                raise
            except Exception as exc:
                LOGGER.error(
                    "file handler failed",
                    extra={"path": display_path(path), "phase": "emit"},
                )
                raise SinkWriteError(
                    display_path(path), self.state.statistics.copy(), list(self.state.errors)
                ) from exc
            self._tick(path)
        LOGGER.info(
            "streaming scan finished: %d files",
            self.state.statistics.total_files,
            extra={"path": display_path(self.root)},
        )
        return self.state.statistics


def scan_repository(
    root: Path | str,
    config: ScanConfiguration | None = None,
    *,
    count_first: bool = False,
    progress_callback: ProgressCallback | None = None,
) -> ScanResult:
    """배치 스캔 편의 함수./Run a batch scan and return the full result."""

    engine = ScanEngine(root, config, progress_callback=progress_callback)
    return engine.scan(count_first=count_first)


def stream_repository(
    root: Path | str,
    sink: "EmissionSink",
    config: ScanConfiguration | None = None,
    *,
    progress_callback: ProgressCallback | None = None,
) -> tuple[ScanStatistics, list[ScanError]]:
    """싱크로 스트리밍 스캔./Drive a sink through header, tree, files and footer.

    The sink is not closed here; the caller owns the destination.
    """

    engine = ScanEngine(root, config, progress_callback=progress_callback)
    check_root(engine.root)
    try:
        sink.write_header(display_path(engine.root), scan_timestamp())
    except EmissionOrderError:
        raise
    except Exception as exc:
        raise SinkWriteError(display_path(engine.root), engine.statistics.copy(), []) from exc
    statistics = engine.stream(sink.write_file, tree_writer=sink.write_tree)
    try:
        sink.write_footer(statistics)
    except EmissionOrderError:
        raise
    except Exception as exc:
        raise SinkWriteError(
            display_path(engine.root), statistics.copy(), list(engine.errors)
        ) from exc
    return statistics, engine.errors

