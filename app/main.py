# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Accounts API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.exceptions import (
    AccountsException,
    accounts_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from app.routers import health, users

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown."""
    logger.info(f"Starting Accounts API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Accounts API")


# Create FastAPI application
app = FastAPI(
    title="Accounts API",
    description="""
## User Account Management

List, fetch, create, update and delete user accounts, and change passwords.

### Error Format

Every failure returns a JSON body with a stable `code` and a readable `detail`:

| Status | Code | When |
|--------|------|------|
| 400 | `VALIDATION_ERROR` | Missing or malformed fields |
| 422 | `INVALID_PASSWORD` | Passwords don't match, or new equals old |
| 422 | `EMAIL_ALREADY_TAKEN` | Another account uses the email |
| 422 | `UNPROCESSABLE_ENTITY` | Unknown user, or the write failed |
| 500 | `INTERNAL_ERROR` | Anything unexpected |
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Users",
            "description": "Create and manage user accounts",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(AccountsException, accounts_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unexpected_exception_handler)


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

app.include_router(
    users.router,
    prefix="/api/v1/users",
    tags=["Users"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Accounts API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
        "users": "/api/v1/users",
    }
