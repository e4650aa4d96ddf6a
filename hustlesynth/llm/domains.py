# hustlesynth/llm/domains.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ModelConfig:
    """업스트림 생성 파라미터"""
    model_name: str
    max_tokens: int
    temperature: float


class UpstreamErrorKind(str, Enum):
    """업스트림 실패 분류"""
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    MALFORMED_RESPONSE = "malformed_upstream_response"


@dataclass(frozen=True)
class CompletionResult:
    """업스트림 호출 결과 - 성공 텍스트 또는 실패 분류"""
    text: Optional[str] = None
    error_kind: Optional[UpstreamErrorKind] = None
    detail: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.error_kind is None

    @staticmethod
    def success(text: str) -> "CompletionResult":
        return CompletionResult(text=text)

    @staticmethod
    def failure(
        kind: UpstreamErrorKind,
        detail: str,
        status_code: Optional[int] = None,
    ) -> "CompletionResult":
        return CompletionResult(error_kind=kind, detail=detail, status_code=status_code)
