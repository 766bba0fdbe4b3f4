"""출력 싱크 API./Emission sink API."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from core.config import ScanConfiguration

from utils import ensure_directory

from .base import EmissionSink
from .json_sink import JsonSink
from .markdown_sink import MarkdownSink
from .tree import generate_directory_tree
from .xml_sink import XmlSink

SINKS: dict[str, type[EmissionSink]] = {
    "xml": XmlSink,
    "json": JsonSink,
    "markdown": MarkdownSink,
    "md": MarkdownSink,
}

OUTPUT_EXTENSIONS = {"xml": ".xml", "json": ".json", "markdown": ".md", "md": ".md"}


def sink_class(format_name: str) -> type[EmissionSink]:
    """형식 이름으로 싱크 클래스 조회./Resolve a sink class from a format name."""

    try:
        return SINKS[format_name.strip().lower()]
    except KeyError as exc:
        supported = ", ".join(sorted(set(SINKS) - {"md"}))
        raise ValueError(f"unsupported format: {format_name} (supported: {supported})") from exc


def create_sink(
    format_name: str, stream: TextIO, config: ScanConfiguration | None = None
) -> EmissionSink:
    """스트림 위 싱크 생성(호출자 소유)./Build a sink over a caller-owned stream."""

    return sink_class(format_name)(stream, config)


def open_sink(
    format_name: str, path: Path, config: ScanConfiguration | None = None
) -> EmissionSink:
    """파일을 열어 싱크 생성, close 시 닫힘./Open a file and build a sink that owns it."""

    cls = sink_class(format_name)
    ensure_directory(path.parent)
    handle = path.open("w", encoding="utf-8", buffering=65536)
    return cls(handle, config, owns_stream=True)


__all__ = [
    "EmissionSink",
    "JsonSink",
    "MarkdownSink",
    "XmlSink",
    "SINKS",
    "OUTPUT_EXTENSIONS",
    "create_sink",
    "generate_directory_tree",
    "open_sink",
    "sink_class",
]
