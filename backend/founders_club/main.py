"""Founders Club API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FoundersClubError → {success: false, error, code}
    - CORS configured from settings (not hardcoded)
    - Database and mailer constructed once on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Mailer lives on app.state and is injected by api/dependencies.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from founders_club.api.error_handlers import register_error_handlers
from founders_club.api.routes import founders_approval, founders_requests, health
from founders_club.config import get_settings
from founders_club.infrastructure.database import init_db
from founders_club.infrastructure.mailer import SmtpMailer
from founders_club.infrastructure.observability import setup_logging

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
    app.state.mailer = SmtpMailer.from_settings(settings)
    logger.info("Founders Club API started")
    yield
    await db.dispose()
    logger.info("Founders Club API shutting down")


app = FastAPI(
    title="Founders Club API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(founders_requests.router)
app.include_router(founders_approval.router)

register_error_handlers(app)
