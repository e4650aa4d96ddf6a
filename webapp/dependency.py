# webapp/dependency.py
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from webapp.container import HustleSynthContainer


@inject
def get_chat_service(
    service = Depends(Provide[HustleSynthContainer.chatbot.service])
):
    """채팅 서비스 의존성"""
    return service


@inject
def get_session_store(
    store = Depends(Provide[HustleSynthContainer.chat_session.store])
):
    """세션 저장소 의존성 (헬스 체크용)"""
    return store
