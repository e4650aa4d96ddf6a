# hustlesynth/chatbot/domains.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from hustlesynth.llm.domains import UpstreamErrorKind

# 클라이언트에 노출되는 메시지 (종류별 고정)
EMPTY_MESSAGE_ERROR = "Message is required"
MESSAGE_TOO_LONG_ERROR = "Message is too long"
UPSTREAM_ERROR_MESSAGE = "Oops, no response from HustleSynth. Try again later."


class ChatErrorKind(str, Enum):
    """채팅 처리 실패 분류"""
    VALIDATION = "validation_error"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    MALFORMED_UPSTREAM_RESPONSE = "malformed_upstream_response"

    @staticmethod
    def from_upstream(kind: UpstreamErrorKind) -> "ChatErrorKind":
        if kind is UpstreamErrorKind.MALFORMED_RESPONSE:
            return ChatErrorKind.MALFORMED_UPSTREAM_RESPONSE
        return ChatErrorKind.UPSTREAM_UNAVAILABLE

    @property
    def is_client_error(self) -> bool:
        return self is ChatErrorKind.VALIDATION


@dataclass(frozen=True)
class ChatResult:
    """채팅 성공 결과"""
    text: str
    session_id: str


@dataclass(frozen=True)
class ChatError:
    """채팅 실패 결과 - message는 클라이언트용, detail은 로그용"""
    kind: ChatErrorKind
    message: str
    detail: Optional[str] = None
    session_id: Optional[str] = None


ChatOutcome = Union[ChatResult, ChatError]
