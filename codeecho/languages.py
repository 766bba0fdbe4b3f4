"""KR: 언어 태그와 주석 규칙. EN: Language tags and comment rules."""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, Pattern, Tuple


class CommentStyle(str, Enum):
    """KR: 주석 문법 계열. EN: Comment syntax family."""

    C_FAMILY = "c_family"
    HASH = "hash"
    MARKUP = "markup"
    CSS = "css"
    NONE = "none"

    @property
    def patterns(self) -> Tuple[Pattern[str], ...]:
        """제거할 정규식 목록(KR). Regexes stripped for this style (EN)."""

        return _COMMENT_PATTERNS[self]


_LINE_SLASH = re.compile(r"//.*$", re.MULTILINE)
_BLOCK_SLASH = re.compile(r"/\*[\s\S]*?\*/")
_LINE_HASH = re.compile(r"#.*$", re.MULTILINE)
_BLOCK_MARKUP = re.compile(r"<!--[\s\S]*?-->")

_COMMENT_PATTERNS: Dict[CommentStyle, Tuple[Pattern[str], ...]] = {
    CommentStyle.C_FAMILY: (_LINE_SLASH, _BLOCK_SLASH),
    CommentStyle.HASH: (_LINE_HASH,),
    CommentStyle.MARKUP: (_BLOCK_MARKUP,),
    CommentStyle.CSS: (_BLOCK_SLASH,),
    CommentStyle.NONE: (),
}


class Language(str, Enum):
    """KR: 지원 언어 태그 Enum. EN: Closed set of language tags."""

    GO = "go"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    JSX = "jsx"
    TSX = "tsx"
    PYTHON = "python"
    JAVA = "java"
    CPP = "cpp"
    C = "c"
    RUST = "rust"
    RUBY = "ruby"
    PHP = "php"
    CSS = "css"
    HTML = "html"
    JSON = "json"
    MARKDOWN = "markdown"
    YAML = "yaml"
    TOML = "toml"
    XML = "xml"
    PERL = "perl"
    BASH = "bash"
    SHELL = "shell"

    @property
    def comment_style(self) -> CommentStyle:
        """언어의 주석 계열(KR). Comment family of the language (EN)."""

        return _COMMENT_STYLES.get(self, CommentStyle.NONE)

    @classmethod
    def from_value(cls, value: str | "Language" | None) -> "Language | None":
        """문자열에서 언어 Enum을 생성(KR). Build enum from tag, None if unknown (EN)."""

        if value is None or isinstance(value, Language):
            return value
        text = value.strip().lower()
        if not text:
            return None
        try:
            return cls(text)
        except ValueError:
            return None


_COMMENT_STYLES: Dict[Language, CommentStyle] = {
    Language.GO: CommentStyle.C_FAMILY,
    Language.JAVASCRIPT: CommentStyle.C_FAMILY,
    Language.TYPESCRIPT: CommentStyle.C_FAMILY,
    Language.JAVA: CommentStyle.C_FAMILY,
    Language.CPP: CommentStyle.C_FAMILY,
    Language.C: CommentStyle.C_FAMILY,
    Language.RUST: CommentStyle.C_FAMILY,
    Language.PHP: CommentStyle.C_FAMILY,
    Language.PYTHON: CommentStyle.HASH,
    Language.RUBY: CommentStyle.HASH,
    Language.HTML: CommentStyle.MARKUP,
    Language.XML: CommentStyle.MARKUP,
    Language.CSS: CommentStyle.CSS,
}

EXTENSION_LANGUAGE: Dict[str, Language] = {
    ".go": Language.GO,
    ".js": Language.JAVASCRIPT,
    ".ts": Language.TYPESCRIPT,
    ".jsx": Language.JSX,
    ".tsx": Language.TSX,
    ".py": Language.PYTHON,
    ".java": Language.JAVA,
    ".cpp": Language.CPP,
    ".c": Language.C,
    ".h": Language.C,
    ".rs": Language.RUST,
    ".rb": Language.RUBY,
    ".php": Language.PHP,
    ".css": Language.CSS,
    ".html": Language.HTML,
    ".json": Language.JSON,
    ".md": Language.MARKDOWN,
    ".yml": Language.YAML,
    ".yaml": Language.YAML,
    ".toml": Language.TOML,
    ".xml": Language.XML,
}

# first match wins; bash precedes the generic sh
SHEBANG_LANGUAGE: Tuple[Tuple[str, Language], ...] = (
    ("python", Language.PYTHON),
    ("node", Language.JAVASCRIPT),
    ("ruby", Language.RUBY),
    ("perl", Language.PERL),
    ("php", Language.PHP),
    ("bash", Language.BASH),
    ("sh", Language.SHELL),
)

CONTENT_SIGNATURES: Tuple[Tuple[str, Language], ...] = (
    ("<?php", Language.PHP),
    ("<?xml", Language.XML),
    ("<!doctype html", Language.HTML),
    ("<html", Language.HTML),
    ("import react", Language.JSX),
    ("from react", Language.JSX),
    ("package main", Language.GO),
    ("#!/usr/bin/env python", Language.PYTHON),
)


def language_for_extension(extension: str) -> Language | None:
    """확장자로 언어를 조회(KR). Look up language by extension (EN)."""

    return EXTENSION_LANGUAGE.get(extension.lower())


__all__ = [
    "CommentStyle",
    "Language",
    "EXTENSION_LANGUAGE",
    "SHEBANG_LANGUAGE",
    "CONTENT_SIGNATURES",
    "language_for_extension",
]
