# hustlesynth/chat_session/settings.py
from pydantic import Field
from pydantic_settings import BaseSettings


class SessionSettings(BaseSettings):
    """세션 관련 설정"""

    TTL_SECONDS: float = Field(default=60 * 60, gt=0, description="세션 유휴 만료 시간 (초)")
    SWEEP_INTERVAL_SECONDS: float = Field(default=300, gt=0, description="정리 주기 (초)")
    CONTEXT_WINDOW_SIZE: int = Field(default=10, ge=0, description="업스트림에 보낼 최근 메시지 수")
    MAX_MESSAGE_LENGTH: int = Field(default=1000, gt=0, description="사용자 메시지 최대 길이")

    model_config = {
        "env_prefix": "SESSION_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }
