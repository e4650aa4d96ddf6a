# hustlesynth/chatbot/container.py
from dependency_injector import containers, providers

from hustlesynth.chat_session.context import ContextWindowBuilder
from .service import ChatService


class ChatbotContainer(containers.DeclarativeContainer):
    """Chatbot 모듈 DI Container"""

    # === 외부 의존성 ===
    session_store = providers.Dependency()
    upstream_client = providers.Dependency()
    model_config = providers.Dependency()
    system_prompt = providers.Dependency(instance_of=str)
    window_size = providers.Dependency(instance_of=int)
    max_message_length = providers.Dependency(instance_of=int)

    # === 컨텍스트 윈도우 ===
    context_builder = providers.Singleton(
        ContextWindowBuilder,
        window_size=window_size,
        system_prompt=system_prompt,
    )

    # === Service 계층 ===
    service = providers.Singleton(
        ChatService,
        session_store=session_store,
        context_builder=context_builder,
        upstream_client=upstream_client,
        model_config=model_config,
        max_message_length=max_message_length,
    )


def create_chatbot_container() -> ChatbotContainer:
    """Chatbot Container 생성"""
    return ChatbotContainer()
