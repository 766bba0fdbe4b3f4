"""스캐너 데이터 모델 정의./Define scanner data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from codeecho import PROCESSED_BY

from utils import format_bytes

ProgressCallback = Callable[["ProgressEvent"], None]
FileHandler = Callable[["FileRecord"], None]
TreeWriter = Callable[[list[str]], None]


@dataclass(slots=True)
class FileRecord:
    """스캔된 단일 파일 메타./Metadata and content for a scanned file."""

    absolute_path: str
    relative_path: str
    size_bytes: int
    modified_at: str
    modified_display: str
    language: str = ""
    extension: str = ""
    is_text: bool = False
    content: str = ""
    line_count: int = 0

    @property
    def size_display(self) -> str:
        """읽기 쉬운 크기./Human readable size."""

        return format_bytes(self.size_bytes)

    def to_payload(self) -> dict[str, object]:
        """JSON 직렬화용 딕트를 생성./Return dict for JSON serialisation."""

        payload: dict[str, object] = {
            "path": self.absolute_path,
            "relative_path": self.relative_path,
            "size": self.size_bytes,
            "size_formatted": self.size_display,
            "mod_time": self.modified_at,
            "mod_time_formatted": self.modified_display,
        }
        if self.content:
            payload["content"] = self.content
        if self.language:
            payload["language"] = self.language
        if self.line_count:
            payload["line_count"] = self.line_count
        if self.extension:
            payload["extension"] = self.extension
        payload["is_text"] = self.is_text
        return payload


@dataclass(slots=True)
class ScanError:
    """스캔 중 발생한 오류 정보를 표현./Represent a recoverable error during scanning."""

    path: str
    phase: str
    message: str
    skipped: bool = True

    def to_payload(self) -> dict[str, object]:
        return {
            "path": self.path,
            "phase": self.phase,
            "message": self.message,
            "skipped": self.skipped,
        }


@dataclass(slots=True)
class ScanStatistics:
    """전체 스캔 요약 통계./Aggregate counters accumulated per file."""

    total_files: int = 0
    total_size_bytes: int = 0
    text_file_count: int = 0
    binary_file_count: int = 0
    language_counts: dict[str, int] = field(default_factory=dict)

    def record(self, record: FileRecord) -> None:
        """파일 하나를 반영합니다./Account for one file record."""

        self.total_files += 1
        self.total_size_bytes += record.size_bytes
        if record.is_text:
            self.text_file_count += 1
        else:
            self.binary_file_count += 1
        if record.language:
            self.language_counts[record.language] = self.language_counts.get(record.language, 0) + 1

    def copy(self) -> "ScanStatistics":
        """스냅샷 복사본./Return an independent snapshot."""

        return ScanStatistics(
            total_files=self.total_files,
            total_size_bytes=self.total_size_bytes,
            text_file_count=self.text_file_count,
            binary_file_count=self.binary_file_count,
            language_counts=dict(self.language_counts),
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "total_files": self.total_files,
            "total_size": self.total_size_bytes,
            "total_size_formatted": format_bytes(self.total_size_bytes),
            "text_files": self.text_file_count,
            "binary_files": self.binary_file_count,
            "language_counts": dict(sorted(self.language_counts.items())),
        }


@dataclass(slots=True)
class ScanResult:
    """배치 스캔 결과./Fully materialised batch scan result."""

    repo_path: str
    scan_time: str
    files: list[FileRecord] = field(default_factory=list)
    statistics: ScanStatistics = field(default_factory=ScanStatistics)
    errors: list[ScanError] = field(default_factory=list)
    processed_by: str = PROCESSED_BY

    @property
    def total_files(self) -> int:
        return self.statistics.total_files

    @property
    def total_size_bytes(self) -> int:
        return self.statistics.total_size_bytes

    def relative_paths(self) -> list[str]:
        """정렬된 상대 경로./Relative paths in record order."""

        return [record.relative_path for record in self.files]

    def to_payload(self) -> dict[str, object]:
        """JSON 직렬화용 딕트를 생성./Return dict for JSON serialisation."""

        return {
            "repo_path": self.repo_path,
            "scan_time": self.scan_time,
            "processed_by": self.processed_by,
            "files": [record.to_payload() for record in self.files],
            "statistics": self.statistics.to_payload(),
            "errors": [error.to_payload() for error in self.errors],
        }


@dataclass(slots=True)
class ProgressStats:
    """스캔 진행 통계./Scan progress statistics."""

    processed: int
    discovered: int
    skipped: int
    elapsed_seconds: float
    eta_seconds: float | None


@dataclass(slots=True)
class ProgressEvent:
    """진행 콜백 이벤트./Event payload for progress callback."""

    stats: ProgressStats
    current_path: str | None
