"""스캔 설정 모델(KR). Scan configuration models (EN)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from pydantic import field_validator

from codeecho import EchoBaseModel, Field, FrozenEchoModel

DEFAULT_EXCLUDED_DIRECTORIES: Tuple[str, ...] = (
    ".git",
    "node_modules",
    "vendor",
    ".vscode",
    ".idea",
    "target",
    "build",
    "dist",
)

DEFAULT_INCLUDED_EXTENSIONS: Tuple[str, ...] = (
    ".go",
    ".js",
    ".ts",
    ".jsx",
    ".tsx",
    ".json",
    ".md",
    ".html",
    ".css",
    ".py",
    ".java",
    ".cpp",
    ".c",
    ".h",
    ".rs",
    ".rb",
    ".php",
    ".yml",
    ".yaml",
    ".toml",
    ".xml",
)

OUTPUT_FORMATS: Tuple[str, ...] = ("xml", "json", "markdown")


class ScanConfiguration(FrozenEchoModel):
    """단일 스캔 동안 불변인 설정 · Settings immutable for one scan."""

    excluded_directory_names: Tuple[str, ...] = DEFAULT_EXCLUDED_DIRECTORIES
    included_extensions: Tuple[str, ...] = ()
    include_content: bool = True
    remove_comments: bool = False
    remove_empty_lines: bool = False
    compress_whitespace: bool = False
    include_directory_tree: bool = True
    include_summary: bool = True
    show_line_numbers: bool = False
    text_ratio_threshold: float = Field(default=0.8, ge=0.0, le=1.0)
    invalid_ratio_threshold: float = Field(default=0.1, ge=0.0, le=1.0)
    sniff_bytes: int = Field(default=8192, gt=0)
    pattern_bytes: int = Field(default=1024, gt=0)

    @field_validator("excluded_directory_names", mode="before")
    @classmethod
    def _split_directories(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(item.strip() for item in value.split(",") if item.strip())
        return value

    @field_validator("included_extensions", mode="before")
    @classmethod
    def _normalise_extensions(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        return tuple(str(item).strip().lower() for item in value if str(item).strip())

    @property
    def transforms_enabled(self) -> bool:
        """콘텐츠 변환 여부 · True when any content transform is on."""

        return self.remove_comments or self.remove_empty_lines or self.compress_whitespace

    def with_overrides(self, **changes: Any) -> "ScanConfiguration":
        """변경값을 적용한 새 설정 · Return a validated copy with changes applied."""

        data = self.model_dump()
        data.update({key: value for key, value in changes.items() if value is not None})
        return type(self).model_validate(data)


class EchoConfig(EchoBaseModel):
    """CLI 전체 설정을 표현 · Represent complete CLI settings."""

    scan: ScanConfiguration = Field(default_factory=ScanConfiguration)
    format: str = "xml"
    log_file: Path = Field(default_factory=lambda: Path(".cache/codeecho.log"))
    log_level: str = "INFO"

    @field_validator("format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        text = value.strip().lower()
        if text == "md":
            text = "markdown"
        if text not in OUTPUT_FORMATS:
            raise ValueError(f"unsupported format: {value}")
        return text

    @classmethod
    def from_file(cls, config_file: Path) -> "EchoConfig":
        """설정 파일에서 로드 · Load settings from YAML config file."""

        data = (
            yaml.safe_load(config_file.read_text(encoding="utf-8"))
            if config_file.exists()
            else {}
        )
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("configuration file must contain a mapping")
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """사전을 반환 · Return dictionary representation."""

        return dict(self.model_dump(mode="json"))


__all__ = [
    "DEFAULT_EXCLUDED_DIRECTORIES",
    "DEFAULT_INCLUDED_EXTENSIONS",
    "OUTPUT_FORMATS",
    "EchoConfig",
    "ScanConfiguration",
]
