"""스캔 상태 추적기./Track scan progress state."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from utils import display_path

from .models import (
    FileRecord,
    ProgressCallback,
    ProgressEvent,
    ProgressStats,
    ScanError,
    ScanStatistics,
)

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanState:
    """스캔 진행 상황을 저장합니다./Store ongoing scan statistics."""

    progress_callback: ProgressCallback | None = None
    throttle_interval: float = 0.2
    statistics: ScanStatistics = field(default_factory=ScanStatistics)
    errors: list[ScanError] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    last_callback_time: float = field(default_factory=time.perf_counter)
    processed: int = 0
    discovered: int = 0
    skipped: int = 0
    current_path: str | None = None

    def record_file(self, record: FileRecord) -> None:
        """파일 하나를 통계에 반영./Account for a completed file exactly once."""

        self.statistics.record(record)
        self.processed += 1
        if self.processed > self.discovered:
            self.discovered = self.processed

    def record_error(self, path: Path | str, phase: str, error: BaseException, *, skipped: bool) -> None:
        """복구 가능한 오류를 기록./Record a recoverable error and keep going."""

        message = display_path(str(error))
        shown = display_path(path)
        self.errors.append(ScanError(path=shown, phase=phase, message=message, skipped=skipped))
        if skipped:
            self.skipped += 1
        LOGGER.warning(
            "%s error for %s: %s",
            phase,
            shown,
            message,
            extra={"path": shown, "phase": phase},
        )

    def snapshot(self, now: float) -> ProgressStats:
        """현재 통계를 계산합니다./Build a snapshot of current stats."""

        elapsed = max(now - self.start_time, 0.0)
        remaining = max(self.discovered - self.processed, 0)
        eta: float | None = None
        if self.processed > 0 and remaining > 0:
            rate = elapsed / float(self.processed)
            eta = round(max(rate * remaining, 0.0), 2)
        elif self.processed > 0 and remaining == 0:
            eta = 0.0
        return ProgressStats(
            processed=self.processed,
            discovered=self.discovered,
            skipped=self.skipped,
            elapsed_seconds=round(elapsed, 2),
            eta_seconds=eta,
        )

    def should_emit_progress(self, now: float) -> bool:
        """콜백 호출 여부를 결정합니다./Decide if progress callback should run."""

        if self.progress_callback is None:
            return False
        if self.throttle_interval <= 0.0:
            return True
        return now - self.last_callback_time >= self.throttle_interval

    def emit_progress(self, now: float) -> None:
        """진행률 콜백을 실행합니다./Invoke the progress callback."""

        if self.progress_callback is None:
            self.last_callback_time = now
            return
        event = ProgressEvent(stats=self.snapshot(now), current_path=self.current_path)
        self.progress_callback(event)
        self.last_callback_time = now
