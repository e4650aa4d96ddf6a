# hustlesynth/llm/client.py
import logging
from typing import Any, Optional, Sequence

import httpx

from hustlesynth.chat_session.domains import Message
from .domains import CompletionResult, ModelConfig, UpstreamErrorKind
from .settings import LLMSettings

logger = logging.getLogger(__name__)

# 로그에 남길 업스트림 응답 본문 최대 길이
_MAX_LOGGED_BODY = 500


class UpstreamClient:
    """OpenAI 호환 chat completions 클라이언트

    한 번 호출에 한 번만 요청하며 재시도하지 않는다.
    실패는 예외 대신 CompletionResult로 분류해 반환한다.
    """

    def __init__(self, settings: LLMSettings, http_client: Optional[httpx.AsyncClient] = None):
        self._settings = settings
        self._endpoint = f"{settings.OPENAI_BASE_URL.rstrip('/')}/chat/completions"
        self._timeout = settings.REQUEST_TIMEOUT
        self._client = http_client or httpx.AsyncClient(timeout=self._timeout)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def complete(self, messages: Sequence[Message], model_config: ModelConfig) -> CompletionResult:
        payload = {
            "model": model_config.model_name,
            "messages": [message.to_payload() for message in messages],
            "max_tokens": model_config.max_tokens,
            "temperature": model_config.temperature,
        }
        headers = {
            "Authorization": f"Bearer {self._settings.OPENAI_API_KEY.get_secret_value()}",
            "Content-Type": "application/json",
        }

        try:
            response = await self._client.post(
                self._endpoint, json=payload, headers=headers, timeout=self._timeout
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Upstream request timed out after {self._timeout}s: {e!r}")
            return CompletionResult.failure(
                UpstreamErrorKind.UPSTREAM_UNAVAILABLE, f"timeout after {self._timeout}s"
            )
        except httpx.HTTPError as e:
            logger.warning(f"Upstream request failed: {e!r}")
            return CompletionResult.failure(UpstreamErrorKind.UPSTREAM_UNAVAILABLE, repr(e))

        if not response.is_success:
            body = response.text[:_MAX_LOGGED_BODY]
            logger.error(f"Upstream returned {response.status_code}: {body}")
            return CompletionResult.failure(
                UpstreamErrorKind.UPSTREAM_UNAVAILABLE,
                f"status {response.status_code}: {body}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            logger.error(f"Upstream returned non-JSON body: {response.text[:_MAX_LOGGED_BODY]}")
            return CompletionResult.failure(
                UpstreamErrorKind.MALFORMED_RESPONSE,
                "response body is not JSON",
                status_code=response.status_code,
            )

        text = self._extract_text(data)
        if text is None:
            logger.error(f"Upstream response has no usable choice: {str(data)[:_MAX_LOGGED_BODY]}")
            return CompletionResult.failure(
                UpstreamErrorKind.MALFORMED_RESPONSE,
                "expected exactly one choice with non-empty message content",
                status_code=response.status_code,
            )
        return CompletionResult.success(text)

    @staticmethod
    def _extract_text(data: Any) -> Optional[str]:
        """choices가 정확히 하나이고 message.content가 비어있지 않을 때만 텍스트 반환"""
        if not isinstance(data, dict):
            return None
        choices = data.get("choices")
        if not isinstance(choices, list) or len(choices) != 1:
            return None
        choice = choices[0]
        message = choice.get("message") if isinstance(choice, dict) else None
        if not isinstance(message, dict):
            return None
        content = message.get("content")
        if not isinstance(content, str) or not content.strip():
            return None
        return content.strip()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
