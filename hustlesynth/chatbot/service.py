# hustlesynth/chatbot/service.py
import logging
from typing import List, Optional

from hustlesynth.chat_session.context import ContextWindowBuilder
from hustlesynth.chat_session.domains import Message, MessageRole
from hustlesynth.chat_session.repository import SessionStore
from hustlesynth.exceptions import SessionNotFoundException
from hustlesynth.llm.client import UpstreamClient
from hustlesynth.llm.domains import ModelConfig
from .domains import (
    EMPTY_MESSAGE_ERROR,
    MESSAGE_TOO_LONG_ERROR,
    UPSTREAM_ERROR_MESSAGE,
    ChatError,
    ChatErrorKind,
    ChatOutcome,
    ChatResult,
)

logger = logging.getLogger(__name__)


class ChatService:
    """채팅 요청 처리 서비스 - 세션 조회, 컨텍스트 구성, 업스트림 호출"""

    def __init__(
        self,
        session_store: SessionStore,
        context_builder: ContextWindowBuilder,
        upstream_client: UpstreamClient,
        model_config: ModelConfig,
        max_message_length: int = 1000,
    ):
        self._store = session_store
        self._context_builder = context_builder
        self._upstream = upstream_client
        self._model_config = model_config
        self._max_message_length = max_message_length

    # === 핵심 처리 ===
    async def handle(self, message: Optional[str], client_session_id: Optional[str] = None) -> ChatOutcome:
        """사용자 메시지 하나를 처리

        검증 실패 시 저장소를 건드리지 않는다. 검증을 통과한 사용자 메시지는
        업스트림 결과와 무관하게 기록되고, 어시스턴트 메시지는 성공 시에만 기록된다.
        """
        error = self._validate_message(message)
        if error is not None:
            logger.warning(f"Rejected chat message: {error.detail}")
            return error
        text = message.strip()

        with self._store.lease(client_session_id) as (session_id, session):
            snapshot = session.append(
                Message(role=MessageRole.USER, content=text, timestamp=self._store.now())
            )
            window = self._context_builder.build(snapshot)
            logger.info(f"Calling upstream - session_id: {session_id}, window: {len(window)} message(s)")

            result = await self._upstream.complete(window, self._model_config)
            if not result.is_success:
                kind = ChatErrorKind.from_upstream(result.error_kind)
                logger.error(f"Upstream failure for session {session_id}: {kind.value} - {result.detail}")
                return ChatError(
                    kind=kind,
                    message=UPSTREAM_ERROR_MESSAGE,
                    detail=result.detail,
                    session_id=session_id,
                )

            session.append(
                Message(role=MessageRole.ASSISTANT, content=result.text, timestamp=self._store.now())
            )
            self._store.touch(session_id)
            return ChatResult(text=result.text, session_id=session_id)

    # === 세션 조회/삭제 ===
    async def history(self, session_id: Optional[str]) -> List[Message]:
        """세션의 메시지 목록 (없는 세션이면 빈 목록)"""
        try:
            session = self._store.get(session_id)
        except SessionNotFoundException:
            return []
        return list(session.messages)

    async def clear(self, session_id: Optional[str]) -> bool:
        """세션 삭제 - 존재 여부와 관계없이 성공"""
        if session_id:
            self._store.delete(session_id)
        return True

    # === 내부 Helper 메서드들 ===
    def _validate_message(self, message: Optional[str]) -> Optional[ChatError]:
        if not isinstance(message, str) or not message.strip():
            return ChatError(
                kind=ChatErrorKind.VALIDATION,
                message=EMPTY_MESSAGE_ERROR,
                detail="message is missing or empty",
            )
        if len(message.strip()) > self._max_message_length:
            return ChatError(
                kind=ChatErrorKind.VALIDATION,
                message=MESSAGE_TOO_LONG_ERROR,
                detail=f"message length {len(message.strip())} exceeds {self._max_message_length}",
            )
        return None
