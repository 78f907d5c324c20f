"""FastAPI application factory and entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx
import uvicorn
from agent_framework.observability import create_resource, enable_instrumentation
from azure.cosmos.exceptions import CosmosHttpResponseError
from azure.monitor.opentelemetry import configure_azure_monitor
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog_studio.config import load_settings
from blog_studio.exceptions import BlogStudioError
from blog_studio.health import check_emulators
from blog_studio.logging import configure_logging
from blog_studio.middleware.rate_limit import FixedWindowRateLimiter, RateLimitMiddleware
from blog_studio.routes import documents, feedback, generation, health, images
from blog_studio.startup import init_agents, init_database

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the store, model, and HTTP clients for the app's lifetime."""
    settings = app.state.settings
    if settings.app.is_development and not await check_emulators(settings):
        raise RuntimeError("Local dependencies are unavailable")

    cosmos = await init_database(settings)
    agents = init_agents(settings)
    http = httpx.AsyncClient(timeout=10)

    app.state.cosmos = cosmos
    app.state.writer = agents.writer
    app.state.editor = agents.editor
    app.state.http = http
    logger.info("Blog Studio started: env=%s", settings.app.env)

    try:
        yield
    finally:
        await http.aclose()
        await cosmos.close()
        logger.info("Blog Studio shutdown complete")


async def _handle_app_error(request: Request, exc: BlogStudioError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def _handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        {"error": message, "details": _jsonable_errors(errors)},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def _handle_store_error(request: Request, exc: CosmosHttpResponseError) -> JSONResponse:
    logger.error(
        "Document store error on %s %s: status=%s",
        request.method,
        request.url.path,
        exc.status_code,
        exc_info=exc,
    )
    return JSONResponse(
        {"error": "Document store unavailable"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _jsonable_errors(errors: list[dict]) -> list[dict]:
    """Keep the JSON-safe parts of pydantic validation errors."""
    return [{"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in errors]


def create_app() -> FastAPI:
    """Build the FastAPI app with middleware, error handlers, and routes."""
    settings = load_settings()
    configure_logging(settings.app.log_level)

    if settings.monitor.connection_string:
        configure_azure_monitor(
            connection_string=settings.monitor.connection_string,
            resource=create_resource(service_name="blog-studio"),
        )
        enable_instrumentation()
        logger.info("Azure Monitor OpenTelemetry configured")

    app = FastAPI(title="Blog Studio", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        RateLimitMiddleware,
        policy=FixedWindowRateLimiter(
            settings.rate_limit.max_requests,
            settings.rate_limit.window_seconds,
        ),
        trust_forwarded=settings.rate_limit.trust_forwarded,
    )
    app.add_exception_handler(BlogStudioError, _handle_app_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(CosmosHttpResponseError, _handle_store_error)

    app.include_router(health.router)
    app.include_router(documents.router)
    app.include_router(generation.router)
    app.include_router(images.router)
    app.include_router(feedback.router)
    return app


def main() -> None:
    """Run the API with uvicorn."""
    uvicorn.run("blog_studio.app:create_app", factory=True, host="0.0.0.0", port=8000)  # noqa: S104


if __name__ == "__main__":
    main()
