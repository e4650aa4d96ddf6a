# hustlesynth/chat_session/reaper.py
import asyncio
import logging
from datetime import timedelta
from typing import Optional

from .repository import SessionStore

logger = logging.getLogger(__name__)


class SessionReaper:
    """유휴 세션 정리 (백그라운드 작업)

    애플리케이션 lifespan에서 start()/stop()으로 관리한다.
    """

    def __init__(self, store: SessionStore, ttl_seconds: float, interval_seconds: float):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")
        self._store = store
        self._ttl = timedelta(seconds=ttl_seconds)
        self._interval = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="session-reaper")
        logger.info(
            f"Session reaper started (ttl={self._ttl.total_seconds()}s, interval={self._interval}s)"
        )

    async def stop(self) -> None:
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Session reaper stopped")

    def run_once(self) -> int:
        """한 번 정리 실행 - 실패해도 루프는 계속된다"""
        try:
            return self._store.sweep(self._ttl)
        except Exception as e:
            logger.error(f"Session sweep failed: {e}", exc_info=True)
            return 0

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            removed = self.run_once()
            logger.debug(f"Reaper tick removed {removed} session(s)")
