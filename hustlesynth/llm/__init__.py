# hustlesynth/llm/__init__.py
from .domains import CompletionResult, ModelConfig, UpstreamErrorKind
from .settings import LLMSettings
from .client import UpstreamClient
from .container import LLMContainer, create_llm_container

__all__ = [
    "CompletionResult",
    "ModelConfig",
    "UpstreamErrorKind",
    "LLMSettings",
    "UpstreamClient",
    "LLMContainer",
    "create_llm_container",
]
