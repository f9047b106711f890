"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from academix.config import get_settings
from academix.infrastructure.database import engine, Base
from academix.core.logging import configure_logging
from academix.core.middleware import setup_middleware
from academix.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
from academix.domain.models.role import Role  # noqa: F401
from academix.domain.models.user import User  # noqa: F401
from academix.domain.models.club import Club, ClubEvent, ClubMember  # noqa: F401
from academix.domain.models.notification import Notification  # noqa: F401

# Import routers
from academix.interfaces.api.auth import router as auth_router
from academix.interfaces.api.clubs import router as clubs_router
from academix.interfaces.api.notifications import router as notifications_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Academix API...", env=settings.ENVIRONMENT)

    # Create DB tables (use migrations for schema changes in production)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    yield

    engine.dispose()
    logger.info("Academix API stopped")


app = FastAPI(
    title="Academix",
    description="API Backend — campus clubs, events and notifications",
    version="1.0.0",
    lifespan=lifespan,
)

# Setup Middleware (Correlation ID, Logging)
setup_middleware(app)

# Error responses are always {"message": ...}
register_exception_handlers(app)

# CORS is added last so it runs first
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(clubs_router)
app.include_router(notifications_router)


@app.get("/")
def root():
    return {
        "name": "Academix",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
