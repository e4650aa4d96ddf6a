# hustlesynth/chat_session/domains.py
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, List, Tuple


class MessageRole(str, Enum):
    """메시지 발화자"""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """대화의 한 턴 (생성 후 불변)"""
    role: MessageRole
    content: str
    timestamp: datetime

    def to_payload(self) -> Dict[str, str]:
        """업스트림 요청용 {role, content} 변환"""
        return {"role": self.role.value, "content": self.content}


@dataclass
class Session:
    """하나의 대화방 - 메시지는 추가만 가능"""
    session_id: str
    created_at: datetime
    last_active_at: datetime
    # 진행 중인 요청 수 (0보다 크면 스윕 대상 제외)
    active_requests: int = 0
    _messages: List[Message] = field(default_factory=list, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @staticmethod
    def new(now: datetime) -> "Session":
        """새 세션 생성"""
        return Session(
            session_id=str(uuid.uuid4()),
            created_at=now,
            last_active_at=now,
        )

    @property
    def messages(self) -> Tuple[Message, ...]:
        with self._lock:
            return tuple(self._messages)

    def append(self, message: Message) -> Tuple[Message, ...]:
        """메시지 추가 후 추가 직후의 스냅샷 반환"""
        with self._lock:
            self._messages.append(message)
            return tuple(self._messages)

    def touch(self, now: datetime) -> None:
        """마지막 활동 시간 갱신 (역행 금지)"""
        with self._lock:
            if now > self.last_active_at:
                self.last_active_at = now

    def idle_for(self, now: datetime) -> timedelta:
        return now - self.last_active_at
