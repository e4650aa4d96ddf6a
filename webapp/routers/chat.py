# webapp/routers/chat.py
import logging
from fastapi import APIRouter, Depends, Path

from hustlesynth.chatbot.domains import ChatError
from hustlesynth.exceptions import (
    HustleSynthException,
    InvalidRequestException,
    UpstreamUnavailableException,
)
from webapp.dependency import get_chat_service
from webapp.dtos import (
    ChatRequest,
    ChatResponseDTO,
    DeleteResponseDTO,
    HistoryResponseDTO,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_exception(error: ChatError) -> HustleSynthException:
    """ChatError를 HTTP 경계의 예외로 변환"""
    if error.kind.is_client_error:
        return InvalidRequestException(error.message)
    return UpstreamUnavailableException(error.message)


@router.post(
    "/chat",
    response_model=ChatResponseDTO,
    summary="채팅",
    description="사용자 메시지를 받아 세션 컨텍스트와 함께 업스트림 LLM에 전달합니다.",
)
async def chat(
    request: ChatRequest,
    chat_service = Depends(get_chat_service)
) -> ChatResponseDTO:
    """채팅"""
    outcome = await chat_service.handle(request.message, request.session_id)
    if isinstance(outcome, ChatError):
        raise _to_exception(outcome)
    return ChatResponseDTO(response=outcome.text, session_id=outcome.session_id)


@router.get(
    "/chat/{session_id}",
    response_model=HistoryResponseDTO,
    summary="세션 메시지 조회"
)
async def get_history(
    session_id: str = Path(..., examples=["3f1c2a9e-0000-4000-8000-000000000000"]),
    chat_service = Depends(get_chat_service)
) -> HistoryResponseDTO:
    """세션 메시지 조회 - 없는 세션이면 빈 목록"""
    messages = await chat_service.history(session_id)
    return HistoryResponseDTO.from_domain(messages)


@router.delete(
    "/chat/{session_id}",
    response_model=DeleteResponseDTO,
    summary="세션 삭제"
)
async def delete_session(
    session_id: str = Path(..., examples=["3f1c2a9e-0000-4000-8000-000000000000"]),
    chat_service = Depends(get_chat_service)
) -> DeleteResponseDTO:
    """세션 삭제 - 항상 성공"""
    await chat_service.clear(session_id)
    return DeleteResponseDTO(success=True)
