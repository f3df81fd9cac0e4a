"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import apiguide
from apiguide.config import get_settings, validate_environment
from apiguide.exceptions import APIGuideError
from apiguide.server.routes import analyze, chat, crawl, health

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup/shutdown logic."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"apiguide server starting up ({settings.environment})")
    validate_environment()

    yield

    logger.info("apiguide server shutting down")


async def handle_apiguide_error(request: Request, exc: APIGuideError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.url.path} failed: {exc}")
    else:
        logger.info(f"{request.url.path} rejected ({exc.status_code}): {exc.error}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "message": details},
    )


def create_app() -> FastAPI:
    """Factory function to create FastAPI application."""
    app = FastAPI(
        title="apiguide API",
        description="Summarize API documentation and answer questions about it",
        version=apiguide.__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(APIGuideError, handle_apiguide_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    app.include_router(health.router)
    app.include_router(crawl.router)
    app.include_router(analyze.router)
    app.include_router(chat.router)

    return app
