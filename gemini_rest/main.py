"""FastAPI gateway over the Gemini client."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from gemini_rest import __version__
from gemini_rest.config import Settings, settings
from gemini_rest.routers import generate_router
from gemini_rest.services.session import get_client, close_client


SERVICE_NAME = "Gemini REST gateway"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str) -> None:
    """Send loguru output to stdout at the given level."""
    logger.remove()
    logger.add(sys.stdout, format=LOG_FORMAT, level=level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared client on startup and close it on shutdown."""
    logger.info(
        f"{SERVICE_NAME} v{__version__} on {settings.host}:{settings.port} "
        f"(text={settings.text_model}, image={settings.image_model}, "
        f"tts={settings.tts_model}, proxy={settings.proxy or 'None'})"
    )
    await get_client()
    yield
    await close_client()
    logger.info("Gateway stopped")


def create_app(config: Settings = settings) -> FastAPI:
    """Assemble the gateway application."""
    configure_logging(config.log_level)

    application = FastAPI(
        title=SERVICE_NAME,
        description="Text, image and speech generation through the Gemini generateContent API",
        version=__version__,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(generate_router, tags=["Generate"])

    @application.get("/", tags=["Health"])
    async def root():
        return {"service": SERVICE_NAME, "version": __version__, "status": "healthy"}

    @application.get("/health", tags=["Health"])
    async def health():
        return {"status": "healthy"}

    return application


app = create_app()


def run():
    """Serve the gateway with uvicorn."""
    import uvicorn

    uvicorn.run(
        "gemini_rest.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
