"""콘텐츠 변환을 검증합니다./Validate content transforms."""

from __future__ import annotations

import json

import pytest

from codeecho.languages import Language
from core.config import ScanConfiguration
from src.scanner.transform import (
    ContentTransformer,
    compress_whitespace,
    minify_json,
    strip_comments,
    strip_empty_lines,
)

GO_SOURCE = "package main\n\n// entry point\nfunc main() {} /* done */\n"


def test_strip_comments_c_family() -> None:
    """라인/블록 주석 제거./Line and block comments are removed for Go."""

    stripped = strip_comments(GO_SOURCE, Language.GO)
    assert "entry point" not in stripped
    assert "done" not in stripped
    assert "func main() {}" in stripped


def test_strip_comments_every_line() -> None:
    source = "a = 1 // one\nb = 2 // two\n"
    assert strip_comments(source, "javascript") == "a = 1 \nb = 2 \n"


def test_strip_comments_multiline_block() -> None:
    source = "x\n/* first\nsecond */\ny\n"
    assert strip_comments(source, "c") == "x\n\ny\n"


def test_strip_comments_hash_and_markup() -> None:
    assert strip_comments("x = 1  # note\n", Language.PYTHON) == "x = 1  \n"
    assert strip_comments("<p>hi</p><!-- gone -->\n", "html") == "<p>hi</p>\n"
    assert strip_comments("a { color: red; } /* c */\n", "css") == "a { color: red; } \n"


@pytest.mark.parametrize("language", ["markdown", "json", "", None, "klingon"])
def test_strip_comments_unknown_or_commentless(language: str | None) -> None:
    source = "# heading\n// not a comment here\n"
    assert strip_comments(source, language) == source


def test_strip_empty_lines() -> None:
    """공백만 있는 줄 제거./Whitespace-only lines are dropped."""

    assert strip_empty_lines("a\n\n   \nb\n\t\nc") == "a\nb\nc"


def test_minify_json_preserves_key_order() -> None:
    source = '{\n  "b": 1,\n  "a": [1, 2]\n}\n'
    minified = minify_json(source)
    assert minified == '{"b":1,"a":[1,2]}'
    assert json.loads(minified) == json.loads(source)


def test_minify_json_invalid_returns_none() -> None:
    assert minify_json("{not json") is None


def test_compress_whitespace_json_falls_back() -> None:
    """잘못된 JSON은 일반 압축으로 대체./Invalid JSON falls back to trailing-space trim."""

    assert compress_whitespace("{broken   \n", Language.JSON) == "{broken\n"


def test_compress_whitespace_js_and_css_collapse_runs() -> None:
    assert compress_whitespace("let   a =\t\t1;   \n", "javascript") == "let a = 1;\n"
    assert compress_whitespace("a  {  }  \n", "css") == "a { }\n"


def test_compress_whitespace_other_languages_keep_indentation() -> None:
    source = "def f():\n    return   1   \n"
    assert compress_whitespace(source, "python") == "def f():\n    return   1\n"


def test_transformer_order_comments_then_empty_lines() -> None:
    """주석 → 빈 줄 → 공백 순서./Comments go first so emptied lines are removed."""

    config = ScanConfiguration(remove_comments=True, remove_empty_lines=True)
    transformer = ContentTransformer(config)
    assert transformer.enabled
    result = transformer.process(GO_SOURCE, Language.GO)
    assert result == "package main\nfunc main() {} "


def test_transformer_is_idempotent() -> None:
    config = ScanConfiguration(
        remove_comments=True, remove_empty_lines=True, compress_whitespace=True
    )
    transformer = ContentTransformer(config)
    once = transformer.process(GO_SOURCE, "go")
    assert transformer.process(once, "go") == once


def test_transformer_disabled_returns_input() -> None:
    transformer = ContentTransformer(ScanConfiguration())
    assert transformer.enabled is False
    assert transformer.process(GO_SOURCE, "go") == GO_SOURCE


def test_go_example_line_and_block_comment() -> None:
    source = "x := 1 // set x\n/* block */\ny := 2"
    assert strip_comments(source, Language.GO) == "x := 1 \n\ny := 2"
