# webapp/container.py
import logging
from dependency_injector import containers, providers

from hustlesynth.chat_session.container import ChatSessionContainer
from hustlesynth.chatbot.container import ChatbotContainer
from hustlesynth.llm.container import LLMContainer

logger = logging.getLogger(__name__)


class HustleSynthContainer(containers.DeclarativeContainer):
    """HustleSynth 애플리케이션 컨테이너"""

    # === Module Containers ===
    chat_session = providers.Container(ChatSessionContainer)
    llm = providers.Container(LLMContainer)

    # 핵심: 세션 저장소와 업스트림 클라이언트를 Chatbot에 주입
    chatbot = providers.Container(
        ChatbotContainer,
        session_store=chat_session.store,
        upstream_client=llm.client,
        model_config=llm.model_config,
        system_prompt=llm.settings.provided.SYSTEM_PROMPT,
        window_size=chat_session.settings.provided.CONTEXT_WINDOW_SIZE,
        max_message_length=chat_session.settings.provided.MAX_MESSAGE_LENGTH,
    )


def create_container() -> HustleSynthContainer:
    """컨테이너 생성"""
    return HustleSynthContainer()
