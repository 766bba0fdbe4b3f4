"""KR: 코드에코 공통 기반 모델. EN: Shared base model for CodeEcho entities."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class EchoBaseModel(BaseModel):
    """Pydantic v2 기반 공통 모델."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


class FrozenEchoModel(BaseModel):
    """불변 모델 기반(KR). Immutable model base (EN)."""

    model_config = ConfigDict(extra="ignore", frozen=True)


__all__: Sequence[str] = ("EchoBaseModel", "FrozenEchoModel", "Field")
