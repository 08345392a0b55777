"""Students API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StudentsApiError → structured JSON responses
    - Pool opened and migrations applied before the first request is served
    - Missing DATABASE_URL or an unreachable database stops the process at startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - The pool reaches handlers only through Depends(get_db_manager)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, students
from app.config import get_settings
from app.infrastructure.database import init_db
from app.infrastructure.migrations import run_migrations
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await run_migrations(db.engine)
    logger.info("Students API started")
    yield
    logger.info("Students API shutting down")
    await db.dispose()


app = FastAPI(
    title="Students API", version="0.1.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(students.router)

register_error_handlers(app)


def run() -> None:
    """Serve the API on all interfaces."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
