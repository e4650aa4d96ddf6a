# hustlesynth/chat_session/context.py
from datetime import datetime
from typing import List, Optional, Sequence

from .domains import Message, MessageRole


def build_context_window(
    history: Sequence[Message],
    window_size: int,
    system_message: Message,
) -> List[Message]:
    """[시스템 메시지] + 최근 window_size개 메시지

    오래된 메시지부터 통째로 제외하며 시스템 메시지는 항상 맨 앞에 둔다.
    """
    if window_size < 0:
        raise ValueError("window_size must be >= 0")
    recent = list(history[-window_size:]) if window_size else []
    return [system_message] + recent


class ContextWindowBuilder:
    """업스트림 호출용 컨텍스트 윈도우 생성기 (부수효과 없음)"""

    def __init__(self, window_size: int, system_prompt: str, created_at: Optional[datetime] = None):
        if window_size < 0:
            raise ValueError("window_size must be >= 0")
        self._window_size = window_size
        self._system_message = Message(
            role=MessageRole.SYSTEM,
            content=system_prompt,
            timestamp=created_at or datetime.now(),
        )

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def system_message(self) -> Message:
        return self._system_message

    def build(self, history: Sequence[Message]) -> List[Message]:
        return build_context_window(history, self._window_size, self._system_message)
