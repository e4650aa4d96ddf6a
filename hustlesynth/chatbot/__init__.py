# hustlesynth/chatbot/__init__.py
from .domains import ChatError, ChatErrorKind, ChatOutcome, ChatResult
from .service import ChatService
from .container import ChatbotContainer, create_chatbot_container

__all__ = [
    "ChatError",
    "ChatErrorKind",
    "ChatOutcome",
    "ChatResult",
    "ChatService",
    "ChatbotContainer",
    "create_chatbot_container",
]
