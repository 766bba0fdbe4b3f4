"""JSON 스트리밍 싱크./Streaming JSON sink."""

from __future__ import annotations

import json

from codeecho import PROCESSED_BY
from src.scanner.models import FileRecord, ScanStatistics

from utils import add_line_numbers

from .base import EmissionSink
from .tree import generate_directory_tree, root_label


def _dump(value: object) -> str:
    return json.dumps(value, ensure_ascii=False)


class JsonSink(EmissionSink):
    """JSON 객체를 스트리밍으로 작성./Stream-write one JSON document."""

    format_name = "json"
    _first = True

    def _write_header(self, repo_path: str, scan_time: str) -> None:
        self._write("{\n")
        self._write(f'  "repo_path": {_dump(repo_path)},\n')
        self._write(f'  "scan_time": {_dump(scan_time)},\n')
        self._write(f'  "processed_by": {_dump(PROCESSED_BY)},\n')
        self._first = True

    def _write_tree(self, paths: list[str]) -> None:
        if not paths:
            return
        tree = generate_directory_tree(paths, root_label(self.repo_path))
        self._write(f'  "directory_tree": {_dump(tree)},\n')

    def _begin_files(self) -> None:
        self._write('  "files": [')

    def _write_file(self, record: FileRecord) -> None:
        payload = record.to_payload()
        if self._config.show_line_numbers and record.content:
            payload["content"] = add_line_numbers(record.content)
        separator = "\n" if self._first else ",\n"
        self._write(separator)
        body = json.dumps(payload, ensure_ascii=False, indent=2)
        self._write("\n".join(f"    {line}" for line in body.split("\n")))
        self._first = False

    def _write_footer(self, statistics: ScanStatistics) -> None:
        self._write("\n  ],\n" if not self._first else "],\n")
        stats = json.dumps(statistics.to_payload(), ensure_ascii=False, indent=2)
        stats = stats.replace("\n", "\n  ")
        self._write(f'  "statistics": {stats}\n')
        self._write("}\n")


__all__ = ["JsonSink"]
