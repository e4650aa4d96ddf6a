# hustlesynth/chat_session/repository.py
import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import Callable, Dict, Iterator, Optional, Tuple

from hustlesynth.exceptions import SessionNotFoundException
from .domains import Session

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class SessionStore:
    """채팅 세션 저장소 (인메모리)

    세션 맵 전체는 맵 락으로, 세션별 메시지 목록은 세션 락으로 보호한다.
    요청 처리 중인 세션은 lease()로 표시되어 sweep()에서 제외된다.
    """

    def __init__(self, clock: Clock = datetime.now):
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.RLock()
        self._clock = clock

    def now(self) -> datetime:
        return self._clock()

    # === 세션 생명주기 ===
    def create(self) -> Tuple[str, Session]:
        """새 세션 생성 및 저장"""
        with self._lock:
            session = Session.new(self._clock())
            while session.session_id in self._sessions:
                session = Session.new(session.created_at)
            self._sessions[session.session_id] = session
        logger.info(f"New session started: {session.session_id}")
        return session.session_id, session

    def get(self, session_id: str) -> Session:
        """ID로 세션 조회"""
        with self._lock:
            session = self._sessions.get(session_id) if session_id else None
        if session is None:
            raise SessionNotFoundException(f"Session {session_id} not found")
        return session

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, Session]:
        """알 수 없는 ID는 채택하지 않고 새 ID로 세션 생성"""
        with self._lock:
            if session_id:
                session = self._sessions.get(session_id)
                if session is not None:
                    return session_id, session
                logger.info(f"Unknown session id, issuing a new one: {session_id}")
            return self.create()

    @contextmanager
    def lease(self, session_id: Optional[str]) -> Iterator[Tuple[str, Session]]:
        """요청 처리 동안 세션을 사용 중으로 표시"""
        with self._lock:
            resolved_id, session = self.get_or_create(session_id)
            session.active_requests += 1
        try:
            yield resolved_id, session
        finally:
            with self._lock:
                session.active_requests -= 1

    def touch(self, session_id: str) -> None:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is not None:
            session.touch(self._clock())

    def delete(self, session_id: str) -> bool:
        """세션 삭제 (멱등)"""
        with self._lock:
            removed = self._sessions.pop(session_id, None)
        if removed is not None:
            logger.info(f"Session deleted: {session_id}")
        return removed is not None

    def sweep(self, max_idle: timedelta) -> int:
        """max_idle 이상 유휴 상태인 세션 제거, 제거 수 반환"""
        now = self._clock()
        with self._lock:
            expired = [
                sid
                for sid, session in self._sessions.items()
                if session.active_requests == 0 and session.idle_for(now) >= max_idle
            ]
            for sid in expired:
                del self._sessions[sid]
        if expired:
            logger.info(f"Swept {len(expired)} idle session(s)")
        return len(expired)

    def stats(self) -> dict:
        with self._lock:
            return {"sessions": len(self._sessions)}

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions
