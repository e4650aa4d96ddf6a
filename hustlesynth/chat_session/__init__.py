# hustlesynth/chat_session/__init__.py
from .domains import Message, MessageRole, Session
from .repository import SessionStore
from .context import ContextWindowBuilder, build_context_window
from .reaper import SessionReaper
from .settings import SessionSettings
from .container import ChatSessionContainer, create_chat_session_container

__all__ = [
    "Message",
    "MessageRole",
    "Session",
    "SessionStore",
    "ContextWindowBuilder",
    "build_context_window",
    "SessionReaper",
    "SessionSettings",
    "ChatSessionContainer",
    "create_chat_session_container",
]
