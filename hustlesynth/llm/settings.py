# hustlesynth/llm/settings.py
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings

from .domains import ModelConfig

DEFAULT_SYSTEM_PROMPT = (
    "You are HustleSynth AI, a friendly productivity coach. "
    "Give short, practical, actionable answers that help the user get more done."
)


class LLMSettings(BaseSettings):
    """LLM 관련 설정 - 중앙화된 설정 관리"""

    # === OpenAI 호환 엔드포인트 ===
    OPENAI_API_KEY: SecretStr = Field(description="업스트림 API 키 (필수)")
    OPENAI_BASE_URL: str = Field(default="https://api.openai.com/v1")
    OPENAI_MODEL: str = Field(default="gpt-3.5-turbo")
    OPENAI_TEMPERATURE: float = Field(default=0.7, ge=0.0, le=2.0)

    # === 기본 모델 설정 ===
    DEFAULT_MAX_TOKENS: int = Field(default=500, gt=0)
    REQUEST_TIMEOUT: float = Field(default=30.0, gt=0, description="요청 타임아웃 (초)")

    # === 시스템 프롬프트 ===
    SYSTEM_PROMPT: str = DEFAULT_SYSTEM_PROMPT

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @field_validator("OPENAI_API_KEY")
    @classmethod
    def validate_api_key(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("OPENAI_API_KEY must not be empty")
        return v

    def get_model_config(self) -> ModelConfig:
        """생성 파라미터 객체 생성"""
        return ModelConfig(
            model_name=self.OPENAI_MODEL,
            max_tokens=self.DEFAULT_MAX_TOKENS,
            temperature=self.OPENAI_TEMPERATURE,
        )
