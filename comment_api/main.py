import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from comment_api import __version__
from comment_api.config import settings
from comment_api.database import create_tables, engine
from comment_api.errors.handlers import register_error_handlers
from comment_api.logging_config import configure_logging
from comment_api.middleware import DisconnectMiddleware, TimingMiddleware
from comment_api.routers import comments, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging(settings.LOG_LEVEL)
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()
    logger.info("Comment API started (env=%s)", settings.APP_ENV)
    yield
    # Shutdown
    await engine.dispose()

app = FastAPI(
    title="Comment API",
    description="CRUD backend for comments",
    version=__version__,
    lifespan=lifespan,
)

# Middleware: the last one added is the outermost.
app.add_middleware(TimingMiddleware)
app.add_middleware(DisconnectMiddleware)

register_error_handlers(app)

# Routers
app.include_router(comments.router)
app.include_router(health.router)
