"""FastAPI application for the barcode server"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from barcode_server.api.dependencies import DependencyContainer, get_container, set_container
from barcode_server.api.routes import generate, info
from barcode_server.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan context manager.

    Builds the encoders and serializer up front so a broken installation
    fails at startup instead of on the first request.
    """
    container = get_container()
    config = container.get_config()
    setup_logging(level=config.log_level, json_format=config.log_json, log_file=config.log_file)

    dispatcher = container.get_dispatcher()
    container.get_generate_code()
    logger.info("Barcode server ready: %s", ", ".join(s.value for s in dispatcher.symbologies))

    yield

    logger.info("Shutting down barcode server")


async def not_found_as_text(request: Request, exc: StarletteHTTPException) -> Response:
    """Unknown routes answer with a plain-text 404 like unknown symbologies"""
    if exc.status_code == 404:
        return PlainTextResponse(content=generate.NOT_FOUND_BODY, status_code=404)
    return await http_exception_handler(request, exc)


def create_app(container: Optional[DependencyContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: Dependency container to install (if None, the global one
            is created on first use)

    Returns:
        Configured FastAPI application
    """
    if container is not None:
        set_container(container)

    app = FastAPI(
        title="Barcode Server",
        description="""
        Generate barcodes and 2-D codes over HTTP.

        `GET /generate/{symbology}/{size}?data={payload}` returns a PNG of
        exactly `{width}x{height}` pixels.

        Supported symbologies: `ean`, `code39`, `code93`, `code128`, `aztec`, `qr`.
        """,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_exception_handler(StarletteHTTPException, not_found_as_text)

    app.include_router(info.router)
    app.include_router(generate.router)

    return app


def main() -> None:
    """Run the server with uvicorn using the environment configuration"""
    import uvicorn

    container = get_container()
    config = container.get_config()
    setup_logging(level=config.log_level, json_format=config.log_json, log_file=config.log_file)

    uvicorn.run(
        create_app(container),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


# Create app instance
app = create_app()


if __name__ == "__main__":
    main()
