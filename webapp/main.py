# webapp/main.py
import logging
import os
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.middleware.cors import CORSMiddleware

from hustlesynth import __version__
from hustlesynth.exceptions import (
    ClientException,
    ConfigurationException,
    HustleSynthException,
    ServerException,
    UpstreamUnavailableException,
)
from webapp.container import HustleSynthContainer, create_container
from webapp.dependency import get_session_store
from webapp.routers import chat

# 로깅 설정
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="[%(asctime)s][%(levelname)5s][%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def _setup_lifespan(container: HustleSynthContainer):
    """애플리케이션 생명주기 설정 - 세션 정리 작업 시작/종료"""
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Setting up HustleSynth chat proxy")
        reaper = container.chat_session.reaper()
        reaper.start()
        try:
            yield
        finally:
            await reaper.stop()
            await container.llm.client().aclose()
            logger.info("Tearing down HustleSynth chat proxy")
    return lifespan


def _validate_settings(container: HustleSynthContainer) -> None:
    """기동 시점 설정 검증 (API 키 누락 등은 요청 전에 실패)"""
    try:
        container.llm.settings()
        container.chat_session.settings()
    except ValidationError as e:
        raise ConfigurationException(f"Invalid configuration: {e}") from e


def _setup_container_and_wiring(container: Optional[HustleSynthContainer]) -> HustleSynthContainer:
    """DI 컨테이너 설정 및 와이어링"""
    container = container or create_container()
    container.wire(modules=["webapp.dependency", "webapp.routers.chat"])
    return container


def _error_body(message, exc: Exception) -> dict:
    return {
        "error": message,
        "code": exc.__class__.__name__,
        "trace_id": str(uuid.uuid4())[:8],
    }


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ClientException)
    async def client_exception_handler(request: Request, exc: ClientException):
        logger.warning(f"Client exception: {exc.message}")
        return JSONResponse(status_code=400, content=_error_body(exc.message, exc))

    @app.exception_handler(UpstreamUnavailableException)
    async def upstream_exception_handler(request: Request, exc: UpstreamUnavailableException):
        logger.warning(f"Upstream unavailable: {exc.message}")
        return JSONResponse(status_code=502, content=_error_body(exc.message, exc))

    @app.exception_handler(ServerException)
    async def server_exception_handler(request: Request, exc: ServerException):
        logger.error(f"Server exception: {exc.message}", exc_info=True)
        return JSONResponse(status_code=500, content=_error_body(exc.message, exc))

    @app.exception_handler(HustleSynthException)
    async def hustlesynth_exception_handler(request: Request, exc: HustleSynthException):
        logger.error(f"HustleSynth exception: {exc.message}", exc_info=True)
        return JSONResponse(status_code=500, content=_error_body(exc.message, exc))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error: {exc.errors()}")
        return JSONResponse(status_code=400, content=_error_body("Invalid request body", exc))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unexpected exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=500, content=_error_body("Internal server error occurred", exc)
        )


def create_app(container: Optional[HustleSynthContainer] = None) -> FastAPI:
    """애플리케이션 생성 및 설정"""
    container = _setup_container_and_wiring(container)
    _validate_settings(container)

    app = FastAPI(
        title="HustleSynth Chat API",
        description="Session-aware chat proxy in front of a hosted LLM completion API.",
        version=__version__,
        lifespan=_setup_lifespan(container),
    )
    app.container = container

    # 라우터 등록 (브라우저 위젯은 /api/chat 사용)
    app.include_router(chat.router, tags=["chat"])
    app.include_router(chat.router, prefix="/api", include_in_schema=False)

    # 미들웨어
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    @app.get("/")
    def read_root():
        return {"message": "Welcome to the HustleSynth Chat API"}

    @app.get("/health")
    def health(store = Depends(get_session_store)):
        return {"status": "ok", **store.stats()}

    return app


def main() -> None:  # pragma: no cover
    import uvicorn

    uvicorn.run(
        "webapp.main:create_app",
        factory=True,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":  # pragma: no cover
    main()
