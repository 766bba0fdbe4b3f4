"""출력 싱크를 검증합니다./Validate emission sinks and document shapes."""

from __future__ import annotations

import io
import json
import xml.etree.ElementTree as ET

import pytest

from core.config import ScanConfiguration
from src.scanner import EmissionOrderError, FileRecord, ScanStatistics
from src.sinks import (
    JsonSink,
    MarkdownSink,
    XmlSink,
    create_sink,
    generate_directory_tree,
    open_sink,
    sink_class,
)
from src.sinks.tree import root_label
from src.sinks.xml_sink import escape_xml


def _record(relative: str, content: str = "", *, language: str = "", is_text: bool = True) -> FileRecord:
    return FileRecord(
        absolute_path=f"/repo/{relative}",
        relative_path=relative,
        size_bytes=len(content.encode("utf-8")),
        modified_at="2024-01-02T03:04:05+00:00",
        modified_display="2024-01-02 03:04:05",
        language=language,
        extension="." + relative.rsplit(".", 1)[-1] if "." in relative else "",
        is_text=is_text,
        content=content,
        line_count=content.count("\n"),
    )


RECORDS = [
    _record("a.go", "package main\n", language="go"),
    _record("src/b.py", 'print("<&>")\n', language="python"),
    _record("img.bin", is_text=False),
]


def _statistics(records: list[FileRecord]) -> ScanStatistics:
    stats = ScanStatistics()
    for record in records:
        stats.record(record)
    return stats


def _emit(sink_type, records, config=None, *, tree=True) -> str:
    buffer = io.StringIO()
    sink = sink_type(buffer, config)
    sink.write_header("/repo", "2024-01-02T03:04:05+00:00")
    if tree:
        sink.write_tree(sorted(record.relative_path for record in records))
    for record in records:
        sink.write_file(record)
    sink.write_footer(_statistics(records))
    sink.close()
    return buffer.getvalue()


def test_directory_tree_rendering() -> None:
    """들여쓰기 트리 렌더링./Tree lines are indented two spaces per depth."""

    tree = generate_directory_tree(["a.go", "src/b.py", "src/lib/c.py"], "repo")
    assert tree == "repo/\n  a.go\n  src/\n    b.py\n    lib/\n      c.py\n"
    assert generate_directory_tree([], "repo") == ""
    assert root_label("/home/user/repo") == "repo"
    assert root_label("") == "project"


def test_json_document_parses() -> None:
    payload = json.loads(_emit(JsonSink, RECORDS))
    assert payload["repo_path"] == "/repo"
    assert payload["processed_by"] == "CodeEcho CLI"
    assert [item["relative_path"] for item in payload["files"]] == ["a.go", "src/b.py", "img.bin"]
    assert payload["files"][1]["content"] == 'print("<&>")\n'
    assert "content" not in payload["files"][2]
    assert payload["statistics"]["total_files"] == 3
    assert payload["statistics"]["binary_files"] == 1
    assert payload["directory_tree"].startswith("repo/\n")


def test_json_empty_document_parses() -> None:
    """파일 없는 문서도 유효./Documents with zero files are still valid."""

    payload = json.loads(_emit(JsonSink, [], tree=True))
    assert payload["files"] == []
    assert "directory_tree" not in payload
    assert payload["statistics"]["total_files"] == 0


def test_json_line_numbers() -> None:
    config = ScanConfiguration(show_line_numbers=True)
    payload = json.loads(_emit(JsonSink, RECORDS[:1], config))
    assert payload["files"][0]["content"].startswith("   1: package main")


def test_xml_document_parses() -> None:
    root = ET.fromstring(_emit(XmlSink, RECORDS).encode("utf-8"))
    assert root.tag == "codeecho"
    files = root.find("files")
    assert files is not None
    entries = files.findall("file")
    assert [entry.get("path") for entry in entries] == ["a.go", "src/b.py", "img.bin"]
    assert entries[1].text.strip() == 'print("<&>")'
    assert entries[2].get("is_text") == "false"
    assert root.findtext("statistics/total_files") == "3"
    assert root.find("directory_structure") is not None
    assert root.find("file_summary") is not None


def test_xml_empty_document_parses() -> None:
    config = ScanConfiguration(include_summary=False)
    root = ET.fromstring(_emit(XmlSink, [], config, tree=False).encode("utf-8"))
    assert root.find("files") is not None
    assert root.find("file_summary") is None
    assert root.findtext("statistics/total_files") == "0"


def test_escape_xml_drops_control_characters() -> None:
    assert escape_xml('a<b>&"c"\x01\x0b') == "a&lt;b&gt;&amp;&quot;c&quot;"
    assert escape_xml("tab\tnewline\n") == "tab\tnewline\n"


def test_markdown_document() -> None:
    text = _emit(MarkdownSink, RECORDS)
    assert text.startswith("# CodeEcho Repository Scan")
    assert "## Directory Structure" in text
    assert "### src/b.py" in text
    assert "```python\nprint(\"<&>\")\n```" in text
    assert "*Binary file - content not displayed*" in text
    assert "| Total Files | 3 |" in text
    assert text.index("## Directory Structure") < text.index("## Files") < text.index("## Summary")


def test_markdown_fence_grows_around_backticks() -> None:
    record = _record("README.md", "```\ncode\n```\n", language="markdown")
    text = _emit(MarkdownSink, [record])
    assert "````markdown\n```\ncode\n```\n````" in text


def test_markdown_empty_document() -> None:
    text = _emit(MarkdownSink, [], tree=False)
    assert "*No files matched the scan filters.*" in text
    assert "| Total Files | 0 |" in text


def test_content_omitted_when_disabled() -> None:
    config = ScanConfiguration(include_content=False)
    record = _record("a.go", "", language="go")
    text = _emit(XmlSink, [record], config)
    assert "<!-- Content not included -->" in text


@pytest.mark.parametrize("sink_type", [JsonSink, XmlSink, MarkdownSink])
def test_order_violations_raise(sink_type) -> None:
    """순서 위반은 예외./Out-of-order calls raise EmissionOrderError."""

    sink = sink_type(io.StringIO())
    with pytest.raises(EmissionOrderError):
        sink.write_file(RECORDS[0])
    sink.write_header("/repo", "now")
    with pytest.raises(EmissionOrderError):
        sink.write_header("/repo", "now")
    sink.write_file(RECORDS[0])
    with pytest.raises(EmissionOrderError):
        sink.write_tree(["a.go"])
    sink.write_footer(_statistics(RECORDS[:1]))
    with pytest.raises(EmissionOrderError):
        sink.write_file(RECORDS[1])
    sink.close()
    sink.close()


def test_sink_registry() -> None:
    assert sink_class("XML") is XmlSink
    assert sink_class("md") is MarkdownSink
    assert isinstance(create_sink("json", io.StringIO()), JsonSink)
    with pytest.raises(ValueError, match="unsupported format"):
        sink_class("yaml")


def test_open_sink_owns_file(tmp_path) -> None:
    target = tmp_path / "nested" / "out.json"
    with open_sink("json", target) as sink:
        sink.write_header("/repo", "now")
        sink.write_footer(ScanStatistics())
    payload = json.loads(target.read_text(encoding="utf-8"))
    assert payload["files"] == []


def test_markdown_tree_fence_grows_around_backticks() -> None:
    buffer = io.StringIO()
    sink = MarkdownSink(buffer)
    sink.write_header("/repo", "now")
    sink.write_tree(["odd```name.txt"])
    sink.write_footer(ScanStatistics())
    sink.close()
    assert "````\nrepo/\n  odd```name.txt\n````\n" in buffer.getvalue()
