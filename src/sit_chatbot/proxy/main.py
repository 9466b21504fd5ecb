"""FastAPI application entry point."""

import os
from contextlib import asynccontextmanager

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sit_chatbot.logging import setup_logging
from starlette.concurrency import run_in_threadpool

from .config import AppConfig
from .dependencies import get_chat_backend, get_config
from .routes import chat_router, speech_router
from .routes.errors import invalid_input_handler

patch_all()
logger = setup_logging()


def _log_environment(config: AppConfig) -> None:
    logger.info(
        "Environment check",
        extra={
            "elevenlabs_api_key": "set" if config.elevenlabs.api_key else "not set",
            "rag_backend_url": config.rag_backend.base_url,
            "audio_normalization": config.audio.normalize,
        },
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    _log_environment(get_config())
    # An unreachable backend is reported but does not block startup.
    backend = app.dependency_overrides.get(get_chat_backend, get_chat_backend)()
    await run_in_threadpool(backend.check_health)
    yield


def create_app(config: AppConfig) -> FastAPI:
    """Builds the proxy application."""
    app = FastAPI(title="SIT Chatbot Proxy", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(
            "Incoming request",
            extra={"method": request.method, "path": request.url.path},
        )
        return await call_next(request)

    app.add_exception_handler(RequestValidationError, invalid_input_handler)
    app.include_router(speech_router)
    app.include_router(chat_router)

    static_dir = config.server.static_dir
    if static_dir and os.path.isdir(static_dir):
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    return app


app = create_app(get_config())


def run() -> None:
    """Serves the proxy with uvicorn."""
    config = get_config()
    logger.info(
        "Starting proxy",
        extra={"host": config.server.host, "port": config.server.port},
    )
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    run()
