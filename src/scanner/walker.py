"""디렉터리 순회 도우미./Directory walking helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, Sequence

from .exceptions import RootNotFoundError

ErrorReporter = Callable[[Path, str, OSError], None]

LOGGER = logging.getLogger(__name__)


def should_exclude_dir(name: str, excluded: frozenset[str]) -> bool:
    """디렉터리 이름이 제외 목록에 있는지./True when basename is excluded."""

    return name in excluded


def should_include_file(path: str, extensions: Sequence[str]) -> bool:
    """확장자 허용 목록과 비교./Case-insensitive suffix match; empty list allows all."""

    if not extensions:
        return True
    lowered = path.lower()
    return any(lowered.endswith(ext.lower()) for ext in extensions)


def check_root(root: Path) -> Path:
    """루트 전제 조건 확인./Validate the scan root before traversal."""

    try:
        root.stat()
    except OSError as exc:
        raise RootNotFoundError(str(root)) from exc
    if not root.is_dir():
        raise RootNotFoundError(str(root), reason="path is not a directory")
    return root


class DirectoryWalker:
    """옵션에 맞게 파일을 순회합니다./Walk files honouring exclusion and inclusion rules."""

    def __init__(
        self,
        root: Path,
        excluded_directories: Sequence[str],
        included_extensions: Sequence[str],
        report_error: ErrorReporter | None = None,
    ) -> None:
        self._root = root
        self._excluded = frozenset(excluded_directories)
        self._include = tuple(included_extensions)
        self._report_error = report_error

    def iter_files(self) -> Iterator[Path]:
        """파일 경로를 생성합니다./Yield file paths depth-first in filesystem order."""

        check_root(self._root)
        stack: list[Path] = [self._root]
        while stack:
            current = stack.pop()
            try:
                with os.scandir(current) as iterator:
                    entries = list(iterator)
            except OSError as exc:
                self._report(current, "walk", exc)
                continue
            subdirs: list[Path] = []
            for entry in entries:
                entry_path = Path(entry.path)
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                    if is_dir:
                        if not should_exclude_dir(entry.name, self._excluded):
                            subdirs.append(entry_path)
                        continue
                    if entry.is_symlink() and not os.path.exists(entry.path):
                        raise FileNotFoundError(f"broken symlink: {entry.path}")
                    if not entry.is_file():
                        continue
                except OSError as exc:
                    self._report(entry_path, "walk", exc)
                    continue
                if should_include_file(entry.path, self._include):
                    yield entry_path
            # reversed so the first listed subdirectory is visited first
            stack.extend(reversed(subdirs))

    def _report(self, path: Path, phase: str, error: OSError) -> None:
        if self._report_error is None:
            LOGGER.debug("walk error at %s: %s", path, error)
            return
        self._report_error(path, phase, error)
