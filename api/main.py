"""FastAPI application for the WebSocket cookie probe."""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

load_dotenv()

from cookieprobe.config import Settings
from cookieprobe.sessions import SessionStore

from .routes import router
from .websocket import router as websocket_router

logger = logging.getLogger(__name__)

TEST_INSTRUCTIONS = (
    "1. Open the web interface in Chrome and Safari",
    '2. Click "Set Cookie" then "Connect WebSocket" - should work',
    '3. Click "Clear Cookie" then "Connect WebSocket" again',
    "4. Chrome should fail (sends stale cookie), Safari should work",
)


def log_startup(settings: Settings) -> None:
    logger.info("HTTP server running on port %d", settings.port)
    logger.info("WebSocket server running on same port %d", settings.port)
    logger.info("Test instructions:")
    for line in TEST_INSTRUCTIONS:
        logger.info("  %s", line)

    if settings.is_production:
        host = settings.public_url or "your-domain.railway.app"
        host = host.removeprefix("https://").removeprefix("http://").rstrip("/")
        logger.info("Production deployment detected")
        logger.info("WebSocket URL should be: wss://%s", host)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_startup(settings)
        yield
        logger.info("Shutting down with %d active sessions", len(app.state.store))

    app = FastAPI(title="WebSocket Cookie Probe", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = SessionStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    app.include_router(websocket_router)

    # Static test page, mounted last so the routes above take precedence
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found, test page disabled", settings.static_dir)

    return app


app = create_app()
