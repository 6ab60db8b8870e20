import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import get_settings
from .errors import StorageError, register_exception_handlers
from .repositories.reviews import ReviewRepository
from .routers import orders, reviews
from .services.pinger import LivenessPinger
from .supabase_client import get_supabase_client
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def verify_store(supabase, table: str) -> None:
    """Fail startup when the review store cannot be reached; uvicorn then exits."""
    try:
        ReviewRepository(supabase, table).check_connection()
    except StorageError:
        logger.exception("Database connection error, shutting down")
        raise
    logger.info("Connected to review store")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    verify_store(get_supabase_client(), settings.REVIEWS_TABLE)

    pinger = None
    if settings.SELF_PING_URL:
        pinger = LivenessPinger(
            settings.SELF_PING_URL,
            interval=settings.PING_INTERVAL_SECONDS,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
        pinger.start()
    app.state.pinger = pinger

    yield

    if pinger:
        pinger.stop()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    app = FastAPI(title=settings.APP_NAME, redirect_slashes=False, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )
    register_exception_handlers(app)

    app.include_router(reviews.router)
    app.include_router(orders.router)

    @app.get("/ping", response_class=PlainTextResponse)
    def ping():
        return "pong"

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
