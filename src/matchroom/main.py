"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from matchroom.api.routes.status import router as status_router
from matchroom.config import VERSION, settings
from matchroom.services.room_bot import RoomBot

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: build the bot unless a test already placed one
    if not hasattr(app.state, "bot"):
        app.state.bot = RoomBot(settings)
    bot: RoomBot = app.state.bot
    await bot.start()
    yield
    # Shutdown: stop timers, the event pump and the notifier worker
    await bot.stop()


app = FastAPI(
    title="RHL Tournament Bot",
    description="Match room moderator - roles, clubs and live match statistics",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "matchroom"}


# Register routers
app.include_router(status_router)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    logger.info(f"Server running on port {settings.port}")
    uvicorn.run("matchroom.main:app", host=settings.host, port=settings.port)
