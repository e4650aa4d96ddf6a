# tests/conftest.py
import logging
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from dependency_injector import providers

from hustlesynth.chat_session.context import ContextWindowBuilder
from hustlesynth.chat_session.repository import SessionStore
from hustlesynth.chat_session.settings import SessionSettings
from hustlesynth.chatbot.service import ChatService
from hustlesynth.llm.domains import CompletionResult, ModelConfig
from hustlesynth.llm.settings import LLMSettings

SYSTEM_PROMPT = "You are a test assistant."


class FakeClock:
    """테스트용 시계 - 수동으로 시간 이동"""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


@pytest.fixture(scope="session", autouse=True)
def initialize_test_logger():
    """테스트 로거 초기화"""
    logger = logging.getLogger()
    logger.setLevel("INFO")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="[%(levelname)5s][%(filename)s:%(lineno)s] %(message)s",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


# === 기본 객체 ===
@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session_store(clock):
    """SessionStore (가짜 시계 사용)"""
    return SessionStore(clock=clock)


@pytest.fixture
def context_builder():
    return ContextWindowBuilder(window_size=10, system_prompt=SYSTEM_PROMPT)


@pytest.fixture
def model_config():
    return ModelConfig(model_name="gpt-test", max_tokens=100, temperature=0.5)


@pytest.fixture
def llm_settings():
    return LLMSettings(
        OPENAI_API_KEY="test-key",
        OPENAI_BASE_URL="https://llm.example.test/v1",
        OPENAI_MODEL="gpt-test",
        SYSTEM_PROMPT=SYSTEM_PROMPT,
    )


@pytest.fixture
def session_settings():
    return SessionSettings(
        TTL_SECONDS=3600,
        SWEEP_INTERVAL_SECONDS=3600,
        CONTEXT_WINDOW_SIZE=10,
        MAX_MESSAGE_LENGTH=1000,
    )


# === Mock 객체들 ===
@pytest.fixture
def mock_upstream_client():
    """Mock Upstream Client"""
    mock = MagicMock()
    mock.complete = AsyncMock(return_value=CompletionResult.success("test response"))
    mock.aclose = AsyncMock()
    return mock


# === Service Fixtures ===
@pytest.fixture
def chat_service(session_store, context_builder, mock_upstream_client, model_config):
    """ChatService"""
    return ChatService(
        session_store=session_store,
        context_builder=context_builder,
        upstream_client=mock_upstream_client,
        model_config=model_config,
        max_message_length=1000,
    )


# === Web App Fixtures ===
@pytest.fixture
def app_container(llm_settings, session_settings, session_store, mock_upstream_client):
    """테스트용 애플리케이션 컨테이너"""
    from webapp.container import create_container

    container = create_container()
    container.llm.settings.override(providers.Object(llm_settings))
    container.llm.client.override(providers.Object(mock_upstream_client))
    container.chat_session.settings.override(providers.Object(session_settings))
    container.chat_session.store.override(providers.Object(session_store))
    yield container
    container.unwire()


@pytest.fixture
def client(app_container):
    """FastAPI TestClient (lifespan 포함)"""
    from fastapi.testclient import TestClient
    from webapp.main import create_app

    app = create_app(app_container)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def test_info(request):
    """테스트 정보 출력"""
    logger = logging.getLogger()
    logger.info(f"테스트 시작: {request.node.name}")
    yield
    logger.info(f"테스트 완료: {request.node.name}")
