"""출력 싱크 계약과 상태 기계./Emission sink contract and state machine."""

from __future__ import annotations

import abc
import logging
from types import TracebackType
from typing import Optional, TextIO, Type

from core.config import ScanConfiguration
from src.scanner.exceptions import EmissionOrderError
from src.scanner.models import FileRecord, ScanStatistics

LOGGER = logging.getLogger(__name__)

START = "start"
HEADER = "header"
TREE = "tree"
FILES = "files"
FOOTER = "footer"
CLOSED = "closed"


class EmissionSink(abc.ABC):
    """헤더 → 트리 → 파일 → 푸터 순서를 강제./Enforce header, tree, files, footer order."""

    format_name = ""

    def __init__(
        self,
        stream: TextIO,
        config: ScanConfiguration | None = None,
        *,
        owns_stream: bool = False,
    ) -> None:
        self._stream = stream
        self._config = config or ScanConfiguration()
        self._owns_stream = owns_stream
        self._stage = START
        self.repo_path = ""
        self.scan_time = ""
        self.files_written = 0

    @property
    def stage(self) -> str:
        return self._stage

    def _require(self, operation: str, *allowed: str) -> None:
        if self._stage not in allowed:
            raise EmissionOrderError(f"{operation} not allowed after {self._stage}")

    def write_header(self, repo_path: str, scan_time: str) -> None:
        """헤더 기록(한 번)./Write the repository header exactly once."""

        self._require("write_header", START)
        self.repo_path = repo_path
        self.scan_time = scan_time
        self._write_header(repo_path, scan_time)
        self._stage = HEADER

    def write_tree(self, paths: list[str]) -> None:
        """트리 기록(최대 한 번)./Write the directory tree at most once."""

        self._require("write_tree", HEADER)
        self._write_tree(paths)
        self._stage = TREE

    def write_file(self, record: FileRecord) -> None:
        """파일 레코드 기록./Write one file record."""

        self._require("write_file", HEADER, TREE, FILES)
        if self._stage != FILES:
            self._begin_files()
            self._stage = FILES
        self._write_file(record)
        self.files_written += 1

    def write_footer(self, statistics: ScanStatistics) -> None:
        """푸터 기록(한 번)./Write the statistics footer exactly once."""

        self._require("write_footer", HEADER, TREE, FILES)
        if self._stage != FILES:
            self._begin_files()
        self._write_footer(statistics)
        self._stage = FOOTER

    def close(self) -> None:
        """버퍼를 비우고 종료./Flush buffered output; closes the stream when owned."""

        if self._stage == CLOSED:
            return
        if self._stage != FOOTER:
            LOGGER.warning("sink closed before footer", extra={"phase": self._stage})
        self._stage = CLOSED
        self._stream.flush()
        if self._owns_stream:
            self._stream.close()

    def __enter__(self) -> "EmissionSink":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def _write(self, text: str) -> None:
        self._stream.write(text)

    @abc.abstractmethod
    def _write_header(self, repo_path: str, scan_time: str) -> None: ...

    @abc.abstractmethod
    def _write_tree(self, paths: list[str]) -> None: ...

    def _begin_files(self) -> None:
        """파일 구간 시작(선택)./Open the files section; default writes nothing."""

    @abc.abstractmethod
    def _write_file(self, record: FileRecord) -> None: ...

    @abc.abstractmethod
    def _write_footer(self, statistics: ScanStatistics) -> None: ...


__all__ = ["EmissionSink", "START", "HEADER", "TREE", "FILES", "FOOTER", "CLOSED"]
