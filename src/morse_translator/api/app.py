"""FastAPI application exposing the Morse translator over HTTP."""

import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

import morse_translator
from morse_translator.codec.morse import decode, encode
from morse_translator.config import ServerConfig

logger = logging.getLogger(__name__)


async def _read_text(request: Request) -> str:
    """Read the raw request body as UTF-8, whatever the content type."""
    body = await request.body()
    return body.decode("utf-8", errors="replace")


def create_router() -> APIRouter:
    """Build the router holding the two translation routes."""
    router = APIRouter()

    @router.post("/text-to-morse", response_class=PlainTextResponse)
    async def text_to_morse(request: Request) -> str:
        text = await _read_text(request)
        morse = encode(text)
        logger.debug("text-to-morse: %d chars -> %d chars", len(text), len(morse))
        return morse

    @router.post("/morse-to-text", response_class=PlainTextResponse)
    async def morse_to_text(request: Request) -> str:
        morse = await _read_text(request)
        text = decode(morse)
        logger.debug("morse-to-text: %d chars -> %d chars", len(morse), len(text))
        return text

    return router


def create_app(config: ServerConfig | None = None) -> FastAPI:
    """Create and configure the HTTP application."""
    config = config or ServerConfig.from_env()

    app = FastAPI(title="Morse Translator", version=morse_translator.__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(create_router(), prefix=config.prefix)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    logger.info("Translation routes mounted at %s", config.prefix or "/")
    return app

