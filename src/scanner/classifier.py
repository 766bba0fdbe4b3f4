"""텍스트 판별 및 언어 감지./Text detection and language classification."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from codeecho.languages import (
    CONTENT_SIGNATURES,
    SHEBANG_LANGUAGE,
    Language,
    language_for_extension,
)
from core.config import ScanConfiguration

LOGGER = logging.getLogger(__name__)

_TEXT_EXTENSIONS = frozenset(
    {
        ".txt", ".md", ".rst", ".asciidoc",
        ".go", ".py", ".js", ".ts", ".jsx", ".tsx",
        ".java", ".c", ".cpp", ".cc", ".cxx", ".h", ".hpp",
        ".cs", ".php", ".rb", ".rs", ".swift", ".kt",
        ".html", ".htm", ".xml", ".xhtml",
        ".css", ".scss", ".sass", ".less",
        ".json", ".yaml", ".yml", ".toml", ".ini", ".cfg", ".conf",
        ".sh", ".bash", ".zsh", ".fish", ".ps1", ".bat", ".cmd",
        ".sql", ".graphql", ".gql",
        ".dockerfile", ".gitignore", ".gitattributes",
        ".makefile", ".cmake",
        ".r", ".rmd", ".m", ".scala", ".clj", ".hs",
        ".vim", ".lua", ".pl", ".tcl",
        ".tex", ".bib", ".cls", ".sty",
        ".csv", ".tsv", ".log",
    }
)

_TEXT_FILENAMES = frozenset(
    {
        "readme", "license", "changelog", "contributing",
        "authors", "contributors", "copying", "install",
        "news", "thanks", "todo", "version",
        "makefile", "dockerfile", "jenkinsfile",
        "gemfile", "rakefile", "guardfile", "procfile",
        ".gitignore", ".gitattributes", ".dockerignore",
        ".eslintrc", ".prettierrc", ".babelrc",
    }
)

_PRINTABLE_EXTRA = frozenset(b"\r\t")


@dataclass(slots=True, frozen=True)
class Classification:
    """텍스트 여부와 언어./Text flag and language tag."""

    is_text: bool
    language: Language | None = None

    @property
    def language_tag(self) -> str:
        return self.language.value if self.language is not None else ""


def is_text_extension(extension: str) -> bool:
    """텍스트 확장자인지./True for known text extensions."""

    return extension.lower() in _TEXT_EXTENSIONS


def is_text_filename(name: str) -> bool:
    """관례적 텍스트 파일명인지./True for conventional text filenames."""

    return name.lower() in _TEXT_FILENAMES


def is_textual_file(path: Path) -> bool:
    """빠른 경로 판정./Fast-path text check from extension or basename only."""

    return is_text_extension(path.suffix) or is_text_filename(path.name)


def count_invalid_utf8(sample: bytes) -> int:
    """잘못된 UTF-8 바이트 수./Count bytes that do not decode as UTF-8."""

    # surrogateescape maps each undecodable byte to one lone surrogate
    decoded = sample.decode("utf-8", errors="surrogateescape")
    return sum(1 for char in decoded if "\udc80" <= char <= "\udcff")


def is_text_content(
    data: bytes,
    *,
    sample_size: int = 8192,
    text_ratio: float = 0.8,
    invalid_ratio: float = 0.1,
) -> bool:
    """콘텐츠 기반 텍스트 판별./Sniff a byte sample for text-ness."""

    if not data:
        return True
    sample = data[:sample_size]
    if b"\x00" in sample:
        return False
    try:
        sample.decode("utf-8")
    except UnicodeDecodeError:
        if count_invalid_utf8(sample) / len(sample) > invalid_ratio:
            return False
    printable = sum(1 for byte in sample if 0x20 <= byte <= 0x7E or byte in _PRINTABLE_EXTRA)
    return printable / len(sample) >= text_ratio


def detect_from_shebang(content: bytes) -> Language | None:
    """셰뱅 라인으로 언어 감지./Detect interpreter language from a shebang line."""

    if len(content) < 3 or not content.startswith(b"#!"):
        return None
    first_line = content.split(b"\n", 1)[0]
    shebang = first_line.decode("utf-8", errors="ignore").lower()
    for needle, language in SHEBANG_LANGUAGE:
        if needle in shebang:
            return language
    return None


def detect_from_patterns(content: bytes, sample_size: int = 1024) -> Language | None:
    """특징 문자열로 언어 감지./Detect language from distinctive signatures."""

    sample = content[:sample_size].decode("utf-8", errors="ignore").lower()
    for needle, language in CONTENT_SIGNATURES:
        if needle in sample:
            return language
    return None


class Classifier:
    """파일 분류기./Decide text status and language for scanned files."""

    def __init__(self, config: ScanConfiguration) -> None:
        self._config = config

    def classify_path(self, path: Path) -> Classification:
        """이름만으로 분류./Classify from extension and filename only."""

        return Classification(
            is_text=is_textual_file(path),
            language=language_for_extension(path.suffix),
        )

    def sniff(self, sample: bytes) -> bool:
        """샘플로 텍스트 여부 판별./Apply the content-sniffing fallback."""

        config = self._config
        return is_text_content(
            sample,
            sample_size=config.sniff_bytes,
            text_ratio=config.text_ratio_threshold,
            invalid_ratio=config.invalid_ratio_threshold,
        )

    def refine(self, classification: Classification, content: bytes) -> Classification:
        """읽은 콘텐츠로 분류 보강./Refine a fast-path result once content was read."""

        is_text = classification.is_text or self.sniff(content)
        language = classification.language
        if language is None:
            language = detect_from_shebang(content) or detect_from_patterns(
                content, self._config.pattern_bytes
            )
            if language is not None:
                LOGGER.debug("content-detected language %s", language.value)
        return Classification(is_text=is_text, language=language)


__all__ = [
    "Classification",
    "Classifier",
    "count_invalid_utf8",
    "detect_from_patterns",
    "detect_from_shebang",
    "is_text_content",
    "is_text_extension",
    "is_text_filename",
    "is_textual_file",
]
