"""XML 스트리밍 싱크./Streaming XML sink."""

from __future__ import annotations

import html
import re

from codeecho import PROCESSED_BY
from src.scanner.models import FileRecord, ScanStatistics

from utils import add_line_numbers, format_bytes

from .base import EmissionSink
from .tree import generate_directory_tree, root_label

ROOT_ELEMENT = "codeecho"

# characters outside the XML 1.0 Char production
_XML_INVALID = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def escape_xml(text: str) -> str:
    """XML 이스케이프./Escape text and drop characters XML 1.0 forbids."""

    return html.escape(_XML_INVALID.sub("", text), quote=True)


class XmlSink(EmissionSink):
    """구조화 마크업 출력./Structured markup output for downstream tools."""

    format_name = "xml"

    def _processing_options(self) -> str:
        config = self._config
        options = []
        if config.remove_comments:
            options.append("comments removed")
        if config.remove_empty_lines:
            options.append("empty lines removed")
        if config.compress_whitespace:
            options.append("code compressed")
        return ", ".join(options) if options else "no processing applied"

    def _write_header(self, repo_path: str, scan_time: str) -> None:
        self._write('<?xml version="1.0" encoding="UTF-8"?>\n')
        self._write(
            "<!-- This file is a merged representation of the entire codebase, "
            f"combined into a single document by {PROCESSED_BY}. -->\n"
        )
        self._write(
            f"<!-- The content has been processed with the following options: "
            f"{self._processing_options()} -->\n"
        )
        self._write(f"<{ROOT_ELEMENT}>\n\n")
        if self._config.include_summary:
            self._write_summary(scan_time)
        self._write("<repository_info>\n")
        self._write(f"<repo_path>{escape_xml(repo_path)}</repo_path>\n")
        self._write(f"<scan_time>{escape_xml(scan_time)}</scan_time>\n")
        self._write(f"<processed_by>{PROCESSED_BY}</processed_by>\n")
        self._write("</repository_info>\n\n")

    def _write_summary(self, scan_time: str) -> None:
        config = self._config
        lines = [
            "<file_summary>",
            "This section contains a summary of this file.",
            "",
            "<purpose>",
            "This file contains a packed representation of the entire repository's contents.",
            "It is designed to be easily consumable by AI systems for analysis, code review,",
            "or other automated processes.",
            "</purpose>",
            "",
            "<file_format>",
            "The content is organized as follows:",
            "1. This summary section",
            "2. Repository information",
        ]
        if config.include_directory_tree:
            lines += ["3. Directory structure", "4. Multiple file entries, each consisting of:"]
        else:
            lines.append("3. Multiple file entries, each consisting of:")
        lines += [
            "  - File path as an attribute",
            "  - Full contents of the file",
            "5. Aggregate statistics" if config.include_directory_tree else "4. Aggregate statistics",
            "</file_format>",
            "",
            "<usage_guidelines>",
            "- This file should be treated as read-only. Any changes should be made to the",
            "  original repository files, not this packed version.",
            "- When processing this file, use the file path to distinguish",
            "  between different files in the repository.",
            "- Be aware that this file may contain sensitive information. Handle it with",
            "  the same level of security as you would the original repository.",
            "</usage_guidelines>",
            "",
            "<notes>",
            "- Files inside excluded directories are not included",
            "- Binary files are not included in this packed representation",
        ]
        if config.transforms_enabled:
            lines.append("- File processing has been applied - content may differ from original files")
        lines += [
            f"- Generated by {PROCESSED_BY} on {escape_xml(scan_time)}",
            "</notes>",
            "",
            "</file_summary>",
            "",
            "",
        ]
        self._write("\n".join(lines))

    def _write_tree(self, paths: list[str]) -> None:
        tree = generate_directory_tree(paths, root_label(self.repo_path))
        self._write("<directory_structure>\n")
        self._write(escape_xml(tree))
        self._write("</directory_structure>\n\n")

    def _begin_files(self) -> None:
        self._write("<files>\n")
        self._write("This section contains the contents of the repository's files.\n\n")

    def _write_file(self, record: FileRecord) -> None:
        attributes = [f'path="{escape_xml(record.relative_path)}"']
        if record.language:
            attributes.append(f'language="{record.language}"')
        if record.line_count > 0:
            attributes.append(f'lines="{record.line_count}"')
        attributes.append(f'size="{record.size_display}"')
        if record.extension:
            attributes.append(f'extension="{escape_xml(record.extension)}"')
        attributes.append(f'modified="{record.modified_display}"')
        attributes.append(f'is_text="{str(record.is_text).lower()}"')
        self._write(f"<file {' '.join(attributes)}>\n")
        if self._config.include_content and record.content and record.is_text:
            content = record.content
            if self._config.show_line_numbers:
                content = add_line_numbers(content)
            self._write(escape_xml(content))
        elif not record.is_text:
            self._write("<!-- Binary file - content not included -->")
        else:
            self._write("<!-- Content not included -->")
        self._write("\n</file>\n\n")

    def _write_footer(self, statistics: ScanStatistics) -> None:
        self._write("</files>\n\n")
        self._write("<statistics>\n")
        self._write(f"<total_files>{statistics.total_files}</total_files>\n")
        self._write(f"<total_size>{format_bytes(statistics.total_size_bytes)}</total_size>\n")
        self._write(f"<text_files>{statistics.text_file_count}</text_files>\n")
        self._write(f"<binary_files>{statistics.binary_file_count}</binary_files>\n")
        if statistics.language_counts:
            self._write("<languages>\n")
            for language, count in sorted(statistics.language_counts.items()):
                self._write(f'<language name="{escape_xml(language)}" files="{count}"/>\n')
            self._write("</languages>\n")
        self._write("</statistics>\n\n")
        self._write(f"</{ROOT_ELEMENT}>\n")


__all__ = ["XmlSink", "escape_xml"]
