"""Pull Tabs - FastAPI entry point."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pulltabs import __version__
from pulltabs.config import NotifierConfig, Settings
from pulltabs.core.exceptions import ApiException, NotFoundError
from pulltabs.core.logging import configure_logging, get_logger
from pulltabs.core.schemas.responses import ErrorResponse
from pulltabs.services.github.routes import router as github_router
from pulltabs.services.slack.client import Dispatcher
from pulltabs.services.status.routes import STATUS_PATH, status_response
from pulltabs.services.status.routes import router as status_router

logger = get_logger("main")

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(
    config: NotifierConfig | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Build the application around one immutable notifier configuration."""
    if config is None:
        config = Settings().to_notifier_config()

    dispatcher = Dispatcher(config, client=http_client)

    if not config.verification_enabled:
        logger.warning("GITHUB_WEBHOOK_SECRET is empty: signature verification is DISABLED for all requests")
    if not config.slack_url:
        logger.warning("SLACK_WEBHOOK_URL is empty: matching events will not be delivered")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Pull Tabs instance {config.instance_id} watching for label '{config.label}'")
        yield
        await dispatcher.aclose()

    app = FastAPI(
        title="Pull Tabs",
        description="Slack alerts for labeled GitHub pull requests",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.dispatcher = dispatcher

    @app.exception_handler(ApiException)
    async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
        """Handle custom API exceptions and return structured error response."""
        logger.warning(f"API error: {exc.message} (status={exc.status_code})")
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=exc.message,
                details=exc.details if exc.details else None,
            ).model_dump(),
        )

    # Include routes
    app.include_router(github_router)
    app.include_router(status_router)

    @app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def not_found(request: Request):
        """Anything not routed above."""
        logger.info(f"No handler for method: {request.method}\tpath: {request.url.path}")
        raise NotFoundError(request.method, request.url.path)

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
        """Methods outside the route tables: status page on /, 404 everywhere else."""
        if exc.status_code != 405:
            return await http_exception_handler(request, exc)
        if request.url.path == STATUS_PATH:
            return status_response(request, config)
        logger.info(f"No handler for method: {request.method}\tpath: {request.url.path}")
        return await api_exception_handler(request, NotFoundError(request.method, request.url.path))

    return app


def run() -> None:
    """Console entry point."""
    import uvicorn

    settings = Settings()
    configure_logging(debug=settings.debug, environment=settings.environment)
    logger.info(f"Starting Pull Tabs on {settings.host}:{settings.port}")
    uvicorn.run(
        create_app(settings.to_notifier_config()),
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
