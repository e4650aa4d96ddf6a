# hustlesynth/llm/container.py
from dependency_injector import containers, providers

from .client import UpstreamClient
from .settings import LLMSettings


class LLMContainer(containers.DeclarativeContainer):
    """LLM 모듈 DI Container"""

    # === Settings ===
    settings = providers.Singleton(LLMSettings)

    # === 생성 파라미터 ===
    model_config = providers.Singleton(
        lambda settings: settings.get_model_config(),
        settings=settings,
    )

    # === Upstream Client ===
    client = providers.Singleton(UpstreamClient, settings=settings)


def create_llm_container() -> LLMContainer:
    return LLMContainer()
