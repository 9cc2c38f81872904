"""Hanami Admin API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every response body, success or failure, is a {success, ...} envelope
    - CORS configured from settings (not hardcoded)
    - Both trust-tier pools initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Route bodies guarded by route_handler.enveloped; global handlers in
      error_handlers.py cover parsing, routing and dependency failures
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hanami.api.error_handlers import register_error_handlers
from hanami.api.routes import (
    auth, course_types, diagnostics, health, lesson_plan_activities,
    media_quota_levels, progress_init, promo_codes, student_media,
    students, teachers, version_comparison,
)
from hanami.config import get_settings
from hanami.infrastructure.database import close_db, init_db
from hanami.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(
        settings.log_level, settings.log_format, settings.secret_values(),
    )
    if not settings.database_service_url:
        logger.warning(
            "DATABASE_SERVICE_URL not set: elevated operations share the standard pool",
        )
    init_db(
        settings.database_url,
        settings.elevated_database_url,
        secrets=settings.secret_values(),
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Hanami API started")
    yield
    logger.info("Hanami API shutting down")
    await close_db()


app = FastAPI(title="Hanami Admin API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(course_types.router)
app.include_router(teachers.router)
app.include_router(students.router)
app.include_router(student_media.router)
app.include_router(version_comparison.router)
app.include_router(promo_codes.router)
app.include_router(media_quota_levels.router)
app.include_router(lesson_plan_activities.router)
app.include_router(progress_init.router)
app.include_router(auth.router)
app.include_router(diagnostics.router)

register_error_handlers(app)
