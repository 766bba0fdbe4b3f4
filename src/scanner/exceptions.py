"""스캐너 전용 예외를 정의합니다./Define scanner specific exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ScanError, ScanStatistics


class ScanErrorBase(RuntimeError):
    """스캔 중 발생한 오류 기본 클래스./Base class for scan errors."""


class RootNotFoundError(ScanErrorBase):
    """스캔 루트가 없거나 디렉터리가 아님./Scan root missing or not a directory."""

    def __init__(self, root: str, reason: str = "path does not exist") -> None:
        super().__init__(f"{reason}: {root}")
        self.root = root


class SinkWriteError(ScanErrorBase):
    """출력 기록 실패로 스캔이 중단됨./Scan aborted because the sink failed."""

    def __init__(
        self,
        path: str,
        statistics: "ScanStatistics",
        errors: "list[ScanError]",
    ) -> None:
        super().__init__(f"error writing file {path}")
        self.path = path
        self.statistics = statistics
        self.errors = errors


class EmissionOrderError(ScanErrorBase):
    """출력 단계 순서 위반./Sink operations called out of order."""
