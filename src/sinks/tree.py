"""디렉터리 트리 렌더링./Directory tree rendering."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Iterable


def root_label(repo_path: str) -> str:
    """트리 최상위 이름./Label for the tree root line."""

    name = PurePosixPath(repo_path.replace("\\", "/")).name
    return name or "project"


def generate_directory_tree(paths: Iterable[str], root_name: str = "project") -> str:
    """정렬된 상대 경로로 트리 문자열 생성./Render sorted relative paths as an indented tree."""

    lines: list[str] = []
    seen: set[str] = set()
    for relative in paths:
        parts = [part for part in relative.split("/") if part]
        for depth in range(len(parts)):
            prefix = "/".join(parts[: depth + 1])
            if prefix in seen:
                continue
            seen.add(prefix)
            indent = "  " * (depth + 1)
            suffix = "" if depth == len(parts) - 1 else "/"
            lines.append(f"{indent}{parts[depth]}{suffix}")
    if not lines:
        return ""
    return f"{root_name}/\n" + "\n".join(lines) + "\n"


__all__ = ["generate_directory_tree", "root_label"]
