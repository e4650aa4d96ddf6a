# hustlesynth/chat_session/container.py
from dependency_injector import containers, providers

from .reaper import SessionReaper
from .repository import SessionStore
from .settings import SessionSettings


class ChatSessionContainer(containers.DeclarativeContainer):
    """Chat Session 모듈 DI Container"""

    # === Settings ===
    settings = providers.Singleton(SessionSettings)

    # === Repository 계층 ===
    store = providers.Singleton(SessionStore)

    # === 백그라운드 정리 ===
    reaper = providers.Singleton(
        SessionReaper,
        store=store,
        ttl_seconds=settings.provided.TTL_SECONDS,
        interval_seconds=settings.provided.SWEEP_INTERVAL_SECONDS,
    )


def create_chat_session_container() -> ChatSessionContainer:
    """Chat Session Container 생성"""
    return ChatSessionContainer()
