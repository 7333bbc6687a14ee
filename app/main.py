# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Email Backend API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#   poetry run python -m app.main
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import (
    EmailBackendException,
    email_backend_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from app.routers import applications, health, teams
from core.services.data_service import DataService
from core.services.email_service import EmailService
from lib.email_transport import build_sink

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup builds the one DataService and EmailService the process uses
    and puts them on app.state for the route dependencies.
    """
    logger.info(f"Starting Email Backend API in {settings.ENVIRONMENT} mode")

    app.state.data_service = DataService(settings.DATA_DIR)
    app.state.email_service = EmailService(
        sink=build_sink(settings),
        from_address=settings.email_from_address,
        app_name=settings.APP_NAME,
    )

    yield

    logger.info("Shutting down Email Backend API")


# Create FastAPI application
app = FastAPI(
    title="Email Backend API",
    description="""
## Executive Hiring Email Notification System

Accepts job applications, matches each to a team, and emails the team's
executives and project leads.

### Quick Start

```bash
# 1. See which teams exist
curl http://localhost:3000/api/teams

# 2. Submit an application
curl -X POST http://localhost:3000/api/applications \\
  -H "Content-Type: application/json" \\
  -d '{"applicantName": "Sarah Chen", "applicantEmail": "sarah@example.com",
       "position": "Backend Engineer", "team": "Engineering"}'

# 3. Move it along
curl -X PATCH http://localhost:3000/api/applications/{id}/status \\
  -H "Content-Type: application/json" -d '{"status": "reviewing"}'
```

Without `EMAIL_HOST`/`EMAIL_USER`/`EMAIL_PASS` notifications are written to
the log instead of being sent.
""",
    version=health.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Applications",
            "description": "Submit and track job applications",
        },
        {
            "name": "Teams",
            "description": "Manage teams and their notification recipients",
        },
        {
            "name": "Health",
            "description": "API health and service info",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
    "X-DNS-Prefetch-Control": "off",
}


@app.middleware("http")
async def guard_requests(request: Request, call_next):
    """Reject oversized bodies and add security headers to every response."""
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > settings.MAX_BODY_BYTES:
        logger.warning(
            f"{request.method} {request.url.path} -> 413: body of {content_length} bytes"
        )
        response = JSONResponse(
            status_code=413,
            content={
                "success": False,
                "error": "Payload too large",
                "message": f"Request body exceeds {settings.MAX_BODY_BYTES} bytes",
                "code": "PAYLOAD_TOO_LARGE",
            },
        )
    else:
        response = await call_next(request)

    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Access log: method, path, status, duration."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
    )
    return response


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(EmailBackendException, email_backend_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Something went wrong!",
            "message": "Internal server error" if settings.is_production else str(exc),
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check and root endpoints
app.include_router(
    health.router,
    tags=["Health"]
)

# Application endpoints
app.include_router(
    applications.router,
    prefix="/api/applications",
    tags=["Applications"]
)

# Team endpoints
app.include_router(
    teams.router,
    prefix="/api/teams",
    tags=["Teams"]
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )
