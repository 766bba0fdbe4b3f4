"""마크다운 스트리밍 싱크./Streaming Markdown sink."""

from __future__ import annotations

from codeecho import PROCESSED_BY
from src.scanner.models import FileRecord, ScanStatistics

from utils import add_line_numbers, format_bytes

from .base import EmissionSink
from .tree import generate_directory_tree, root_label


def _fence_for(content: str) -> str:
    fence = "```"
    while fence in content:
        fence += "`"
    return fence


class MarkdownSink(EmissionSink):
    """사람이 읽는 산문/표 출력./Prose and table output for human readers."""

    format_name = "markdown"

    def _write_header(self, repo_path: str, scan_time: str) -> None:
        self._write("# CodeEcho Repository Scan\n\n")
        self._write(f"**Repository:** {repo_path}  \n")
        self._write(f"**Scan Time:** {scan_time}  \n")
        self._write(f"**Processed By:** {PROCESSED_BY}  \n\n")

    def _write_tree(self, paths: list[str]) -> None:
        tree = generate_directory_tree(paths, root_label(self.repo_path))
        fence = _fence_for(tree)
        self._write("## Directory Structure\n\n")
        self._write(f"{fence}\n{tree}{fence}\n\n")

    def _begin_files(self) -> None:
        self._write("## Files\n\n")

    def _write_file(self, record: FileRecord) -> None:
        self._write(f"### {record.relative_path}\n\n")
        meta = [f"**Size:** {record.size_display}"]
        if record.language:
            meta.append(f"**Language:** {record.language}")
        if record.line_count > 0:
            meta.append(f"**Lines:** {record.line_count}")
        if record.extension:
            meta.append(f"**Extension:** {record.extension}")
        meta.append(f"**Modified:** {record.modified_display}")
        meta.append(f"**Text File:** {str(record.is_text).lower()}")
        self._write(" | ".join(meta) + "\n\n")
        if self._config.include_content and record.content and record.is_text:
            content = record.content
            if self._config.show_line_numbers:
                content = add_line_numbers(content)
            fence = _fence_for(content)
            body = content if content.endswith("\n") else content + "\n"
            self._write(f"{fence}{record.language.lower()}\n{body}{fence}\n\n")
        elif not record.is_text:
            self._write("*Binary file - content not displayed*\n\n")
        else:
            self._write("*Content not included*\n\n")
        self._write("---\n\n")

    def _write_footer(self, statistics: ScanStatistics) -> None:
        if self.files_written == 0:
            self._write("*No files matched the scan filters.*\n\n")
        if not self._config.include_summary:
            return
        self._write("## Summary\n\n")
        self._write("| Metric | Value |\n")
        self._write("| --- | --- |\n")
        self._write(f"| Total Files | {statistics.total_files} |\n")
        self._write(f"| Total Size | {format_bytes(statistics.total_size_bytes)} |\n")
        self._write(f"| Text Files | {statistics.text_file_count} |\n")
        self._write(f"| Binary Files | {statistics.binary_file_count} |\n\n")
        if statistics.language_counts:
            self._write("| Language | Files |\n")
            self._write("| --- | --- |\n")
            ordered = sorted(statistics.language_counts.items(), key=lambda item: (-item[1], item[0]))
            for language, count in ordered:
                self._write(f"| {language} | {count} |\n")
            self._write("\n")


__all__ = ["MarkdownSink"]
