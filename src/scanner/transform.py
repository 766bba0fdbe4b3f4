"""콘텐츠 변환 파이프라인./Content transformation pipeline."""

from __future__ import annotations

import json
import logging
import re

from codeecho.languages import Language
from core.config import ScanConfiguration

LOGGER = logging.getLogger(__name__)

_HORIZONTAL_RUN = re.compile(r"[ \t]+")
_TRAILING_WS = re.compile(r"[ \t]+$", re.MULTILINE)


def strip_comments(content: str, language: Language | str | None) -> str:
    """언어별 주석 제거./Strip comments using the language's lexical rule."""

    tag = Language.from_value(language)
    if tag is None:
        return content
    for pattern in tag.comment_style.patterns:
        content = pattern.sub("", content)
    return content


def strip_empty_lines(content: str) -> str:
    """빈 줄 제거./Drop lines whose trimmed form is empty."""

    return "\n".join(line for line in content.split("\n") if line.strip())


def minify_json(content: str) -> str | None:
    """JSON 최소화, 실패 시 None./Minify JSON or return None when unparsable."""

    try:
        parsed = json.loads(content)
    except ValueError:
        return None
    return json.dumps(parsed, ensure_ascii=False, separators=(",", ":"))


def compress_whitespace(content: str, language: Language | str | None) -> str:
    """공백 압축./Compress whitespace, minifying JSON when possible."""

    tag = Language.from_value(language)
    if tag is Language.JSON:
        minified = minify_json(content)
        if minified is not None:
            return minified
        LOGGER.debug("json minify failed, using generic compression")
    elif tag in (Language.JAVASCRIPT, Language.CSS):
        content = _HORIZONTAL_RUN.sub(" ", content)
    return _TRAILING_WS.sub("", content)


class ContentTransformer:
    """설정에 따라 변환 단계를 순서대로 적용./Apply enabled transforms in fixed order."""

    def __init__(self, config: ScanConfiguration) -> None:
        self._config = config

    @property
    def enabled(self) -> bool:
        return self._config.transforms_enabled

    def process(self, content: str, language: Language | str | None) -> str:
        """주석 → 빈 줄 → 공백 순으로 처리./Comments, then empty lines, then whitespace."""

        config = self._config
        if config.remove_comments:
            content = strip_comments(content, language)
        if config.remove_empty_lines:
            content = strip_empty_lines(content)
        if config.compress_whitespace:
            content = compress_whitespace(content, language)
        return content


__all__ = [
    "ContentTransformer",
    "compress_whitespace",
    "minify_json",
    "strip_comments",
    "strip_empty_lines",
]
