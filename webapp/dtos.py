# webapp/dtos.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from hustlesynth.chat_session.domains import Message


class CamelModel(BaseModel):
    """모든 Request, Response 모델에 CamelCase를 적용"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ===== 채팅 관련 DTO =====
class ChatRequest(CamelModel):
    """채팅 요청 DTO - 메시지 검증은 ChatService에서 수행"""
    message: Optional[str] = Field(None, description="사용자 메시지", examples=["How do I stop procrastinating?"])
    session_id: Optional[str] = Field(None, description="이전 응답에서 받은 세션 ID")

    @field_validator("session_id")
    @classmethod
    def normalize_session_id(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()


class ChatResponseDTO(CamelModel):
    """채팅 응답 DTO"""
    response: str = Field(description="어시스턴트 응답")
    session_id: str = Field(description="다음 요청에 그대로 돌려보낼 세션 ID")


# ===== 세션 관련 DTO =====
class MessageDTO(CamelModel):
    """메시지 DTO"""
    role: str = Field(examples=["user"])
    content: str
    timestamp: str = Field(description="생성 시간 (ISO 8601)", examples=["2024-01-01T00:00:00"])

    @staticmethod
    def from_domain(message: Message) -> "MessageDTO":
        return MessageDTO(
            role=message.role.value,
            content=message.content,
            timestamp=message.timestamp.isoformat(),
        )


class HistoryResponseDTO(CamelModel):
    """세션 메시지 목록 DTO"""
    messages: List[MessageDTO] = Field(default_factory=list)

    @staticmethod
    def from_domain(messages: List[Message]) -> "HistoryResponseDTO":
        return HistoryResponseDTO(messages=[MessageDTO.from_domain(m) for m in messages])


class DeleteResponseDTO(CamelModel):
    """세션 삭제 응답 DTO"""
    success: bool = True
