"""파이프라인 예외 정의(KR). Pipeline exception definitions (EN)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PipelineError(Exception):
    """스캔/출력 단계 오류를 표현 · Represent a scan or emission stage failure."""

    message: str
    stage: str | None = None
    path: str | None = None

    def __str__(self) -> str:
        """사람 친화적 메시지를 생성 · Build human friendly message."""

        text = self.message
        if self.path:
            text = f"{text}: {self.path}"
        if self.stage:
            return f"[{self.stage}] {text}"
        return text


__all__ = ["PipelineError"]
