"""공통 유틸리티를 제공합니다./Provide shared utilities."""

from __future__ import annotations

import os
from pathlib import Path

_BYTE_UNITS = "KMGTPE"


def ensure_directory(path: Path) -> None:
    """폴더가 없으면 생성합니다./Create directory if missing."""

    path.mkdir(parents=True, exist_ok=True)


def count_lines(content: str) -> int:
    """줄 수를 셉니다./Count lines; a trailing newline adds no extra line."""

    if not content:
        return 0
    lines = content.count("\n") + 1
    if content.endswith("\n"):
        lines -= 1
    return lines


def format_bytes(size: int) -> str:
    """바이트를 읽기 쉬운 단위로 변환합니다./Render byte count as 1.5 KB style text."""

    unit = 1024
    if size < unit:
        return f"{size} B"
    div, exp = unit, 0
    n = size // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{size / div:.1f} {_BYTE_UNITS[exp]}B"


def add_line_numbers(content: str) -> str:
    """각 줄 앞에 번호를 붙입니다./Prefix each line with a 4-wide line number."""

    return "\n".join(f"{index:4d}: {line}" for index, line in enumerate(content.split("\n"), 1))


def display_path(value: str | os.PathLike[str]) -> str:
    """출력용 경로 문자열./Path text safe for UTF-8 output; undecodable bytes become U+FFFD."""

    return os.fsencode(value).decode("utf-8", errors="replace")
