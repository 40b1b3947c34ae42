"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    HOST,
    LOG_LEVEL,
    PORT,
    QuizboardError,
    StoreUnavailableError,
    configure_logging,
    dispose_engine,
    get_engine,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        get_engine()
    except StoreUnavailableError:
        logger.warning("Database not reachable at startup; will retry on first request")
    yield
    dispose_engine()


async def handle_quizboard_error(request: Request, exc: QuizboardError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def create_app() -> FastAPI:
    configure_logging(LOG_LEVEL)
    app = FastAPI(title="Quiz Leaderboard API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_exception_handler(QuizboardError, handle_quizboard_error)

    register_routes(app)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("quizboard.app:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
