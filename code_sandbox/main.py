import sys
from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI

from code_sandbox.api.routers import containers, health
from code_sandbox.config import RuntimeConfig, Settings, get_settings
from code_sandbox.core.runtime import DockerRuntime
from code_sandbox.errors import ClientInitError, register_error_handlers
from code_sandbox.log_config import configure_logging

logger = structlog.get_logger(__name__)


def create_app(runtime: DockerRuntime, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the HTTP front-end around an already-connected runtime client.

    The runtime is owned by the app from here on and closed on shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Code sandbox API starting", default_image=settings.DEFAULT_IMAGE)
        try:
            yield
        finally:
            logger.info("Code sandbox API shutting down")
            runtime.close()

    app = FastAPI(title="Code Sandbox", lifespan=lifespan)
    app.state.runtime = runtime
    app.state.settings = settings

    register_error_handlers(app)

    app.include_router(health.router, tags=["system"])
    app.include_router(containers.router, prefix="/api/containers", tags=["containers"])
    return app


def run():
    """Entry point: connect to the runtime, then serve. Exits if the runtime is unusable."""
    settings = get_settings()
    configure_logging(settings)

    try:
        runtime = DockerRuntime(RuntimeConfig())
    except ClientInitError as e:
        logger.error("Failed to init container runtime client", error=str(e))
        sys.exit(1)

    logger.info(
        "Connected to container runtime",
        base_url=runtime.base_url,
        api_version=runtime.api_version,
    )

    app = create_app(runtime, settings)
    logger.info("Listening", host=settings.HOST, port=settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
