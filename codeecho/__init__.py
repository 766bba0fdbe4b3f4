"""KR: 코드에코 도메인 패키지 루트. EN: CodeEcho domain package root."""

from __future__ import annotations

from .base import EchoBaseModel, Field, FrozenEchoModel
from .languages import CommentStyle, Language, language_for_extension

PROCESSED_BY = "CodeEcho CLI"
__version__ = "1.0.0"

__all__ = (
    "EchoBaseModel",
    "FrozenEchoModel",
    "Field",
    "CommentStyle",
    "Language",
    "language_for_extension",
    "PROCESSED_BY",
    "__version__",
)
