"""파일 분류기를 검증합니다./Validate text and language classification."""

from __future__ import annotations

from pathlib import Path

import pytest

from codeecho.languages import Language
from core.config import ScanConfiguration
from src.scanner.classifier import (
    Classifier,
    count_invalid_utf8,
    detect_from_patterns,
    detect_from_shebang,
    is_text_content,
    is_textual_file,
)


@pytest.mark.parametrize(
    "name",
    ["main.go", "notes.TXT", "README", "Makefile", ".gitignore", "Dockerfile", "style.scss"],
)
def test_fast_path_accepts_known_text(name: str) -> None:
    """확장자/파일명으로 텍스트 판정./Extension or conventional filename means text."""

    assert is_textual_file(Path(name))


@pytest.mark.parametrize("name", ["data.bin", "photo.png", "deploy", "archive.tar.gz"])
def test_fast_path_is_inconclusive_for_unknown(name: str) -> None:
    assert not is_textual_file(Path(name))


def test_nul_byte_means_binary() -> None:
    """NUL 바이트는 바이너리./A NUL byte classifies the sample as binary."""

    sample = b"0123456789\x00abcdef"
    assert is_text_content(sample) is False


def test_empty_sample_is_text() -> None:
    assert is_text_content(b"") is True


def test_printable_ratio_threshold() -> None:
    """출력 가능 비율 80% 기준./Printable ratio must reach 80%."""

    mostly_text = b"a" * 80 + b"\x01" * 20
    mostly_control = b"a" * 79 + b"\x01" * 21
    assert is_text_content(mostly_text) is True
    assert is_text_content(mostly_control) is False


def test_thresholds_are_tunable() -> None:
    sample = b"a" * 70 + b"\x01" * 30
    assert is_text_content(sample) is False
    assert is_text_content(sample, text_ratio=0.6) is True


def test_invalid_utf8_ratio() -> None:
    """잘못된 UTF-8 비율 10% 초과는 바이너리./More than 10% invalid UTF-8 is binary."""

    assert count_invalid_utf8(b"ab\xff\xfecd") == 2
    assert is_text_content(b"a" * 50 + b"\xff" * 10) is False
    # below the invalid limit but still judged by the printable ratio
    assert is_text_content(b"a" * 95 + b"\xff" * 5) is True


def test_utf8_multibyte_text_is_text() -> None:
    sample = ("hello world " * 20 + "안녕").encode("utf-8")
    assert is_text_content(sample) is True


def test_sniff_only_reads_sample_window() -> None:
    data = b"a" * 10 + b"\x00" + b"b" * 10
    assert is_text_content(data, sample_size=10) is True
    assert is_text_content(data, sample_size=11) is False


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        (b"#!/usr/bin/env python3\nprint(1)\n", Language.PYTHON),
        (b"#!/usr/bin/env node\nconsole.log(1)\n", Language.JAVASCRIPT),
        (b"#!/bin/bash\necho hi\n", Language.BASH),
        (b"#!/bin/sh\necho hi\n", Language.SHELL),
        (b"#!/usr/bin/php\n<?php echo 1;\n", Language.PHP),
        (b"echo hi\n", None),
        (b"#!", None),
    ],
)
def test_detect_from_shebang(content: bytes, expected: Language | None) -> None:
    assert detect_from_shebang(content) is expected


def test_detect_from_patterns_is_case_insensitive() -> None:
    assert detect_from_patterns(b"<!DOCTYPE HTML>\n<html></html>") is Language.HTML
    assert detect_from_patterns(b"package main\n\nfunc main() {}\n") is Language.GO
    assert detect_from_patterns(b"Import React from 'react'\n") is Language.JSX
    assert detect_from_patterns(b"nothing special") is None


def test_detect_from_patterns_limits_window() -> None:
    content = b" " * 2000 + b"<?php"
    assert detect_from_patterns(content) is None
    assert detect_from_patterns(content, sample_size=4096) is Language.PHP


def test_classifier_extension_wins_over_content() -> None:
    """확장자 언어가 우선./Extension lookup takes precedence over content signatures."""

    classifier = Classifier(ScanConfiguration())
    fast = classifier.classify_path(Path("page.py"))
    assert fast.is_text and fast.language is Language.PYTHON
    refined = classifier.refine(fast, b"<?php echo 1; ?>")
    assert refined.language is Language.PYTHON


def test_classifier_refines_unknown_file() -> None:
    classifier = Classifier(ScanConfiguration())
    fast = classifier.classify_path(Path("deploy"))
    assert fast.is_text is False
    assert fast.language_tag == ""
    refined = classifier.refine(fast, b"#!/usr/bin/env ruby\nputs 1\n")
    assert refined.is_text is True
    assert refined.language_tag == "ruby"


def test_classifier_uses_configured_thresholds() -> None:
    strict = Classifier(ScanConfiguration(text_ratio_threshold=1.0))
    assert strict.sniff(b"abc\x01") is False
    assert Classifier(ScanConfiguration()).sniff(b"abcdefgh\x01") is True


def test_only_cr_and_tab_count_beside_ascii_printables() -> None:
    """줄바꿈은 출력 가능 비율에 포함되지 않음./Newlines do not count as printable."""

    assert is_text_content(b"a\n\n\n\nb\n\n\n\n\n") is False
    assert is_text_content(b"a\r\r\r\rb\t\t\t\t\t") is True
