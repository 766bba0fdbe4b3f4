"""스트리밍 파일 스캐너 API./Streaming file scanner API."""

from __future__ import annotations

from .classifier import Classification, Classifier
from .exceptions import EmissionOrderError, RootNotFoundError, ScanErrorBase, SinkWriteError
from .models import (
    FileRecord,
    ProgressEvent,
    ProgressStats,
    ScanError,
    ScanResult,
    ScanStatistics,
)
from .runner import ScanEngine, scan_repository, stream_repository
from .transform import ContentTransformer
from .walker import DirectoryWalker, check_root

__all__ = [
    "Classification",
    "Classifier",
    "ContentTransformer",
    "DirectoryWalker",
    "EmissionOrderError",
    "FileRecord",
    "ProgressEvent",
    "ProgressStats",
    "RootNotFoundError",
    "ScanEngine",
    "ScanError",
    "ScanErrorBase",
    "ScanResult",
    "ScanStatistics",
    "SinkWriteError",
    "check_root",
    "scan_repository",
    "stream_repository",
]
