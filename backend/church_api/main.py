"""
Children's Church API — FastAPI Application Factory
=====================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes configuration, middleware, routes, error mapping and
       lifecycle in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Run by uvicorn (`uvicorn church_api.main:app`) or the `church-api`
       console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────┐ ┌─────────┐  │
    │  │  Req ID  │→│  Logging    │→│ GZip │→│  CORS   │  │
    │  └──────────┘ └─────────────┘ └──────┘ └─────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────┐ ┌────────────┐ ┌───────────┐  │
    │  │ /api/qanda/...   │ │ /api/notes │ │ /health   │  │
    │  └──────────────────┘ └────────────┘ └───────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Store→500    │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Create the document file if it does not exist yet
    3. Log port, environment, CORS origins and data file
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from church_api import __version__
from church_api.config import settings
from church_api.exceptions import NotFoundError, StoreError, ValidationError
from church_api.middleware.logging import RequestLoggingMiddleware
from church_api.middleware.request_id import RequestIDMiddleware, request_id_var
from church_api.routes import health, notes, questions
from church_api.store import document_store

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure application logging once, before anything else logs.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s to stdout,
    which is what the hosting platform collects.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access middleware already logs each request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: logging, document file, banner. Nothing to release on shutdown."""
    setup_logging()

    created = await document_store.initialize()
    logger.info(
        "Document store %s: %s",
        "created" if created else "found",
        document_store.path.resolve(),
    )

    logger.info("Children's Church API running on port %d", settings.port)
    logger.info("Environment: %s", settings.environment)
    logger.info("CORS enabled for: %s", ", ".join(settings.cors_origins_list))

    yield

    logger.info("Children's Church API shutting down")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and a single error envelope.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request (malformed body)
        NotFoundError           → 404 Not Found
        StoreError / Corrupt    → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Server-side details (file paths, parser errors) are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Body is not JSON or a field has the wrong type; same contract as ValidationError."""
        rid = request_id_var.get("")
        fields = [".".join(str(part) for part in err.get("loc", ())[1:]) for err in exc.errors()]
        logger.warning("[%s] Malformed request body: %s", rid, fields)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": "Request body is invalid",
                "details": {"fields": [f for f in fields if f]},
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        """Unreadable, unwritable or corrupt data file; context stays server-side."""
        rid = request_id_var.get("")
        logger.error(
            "[%s] %s: %s | Context: %s",
            rid,
            type(exc).__name__,
            exc.message,
            exc.context,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again.",
                "request_id": rid,
            },
            # Served by ServerErrorMiddleware, outside RequestIDMiddleware
            headers={"X-Request-ID": rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Assemble middleware, exception handlers and routers."""
    app = FastAPI(
        title="Children's Church API",
        description="Audience Q&A and scripture study notes backed by a JSON document store.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition (last added = outermost)
    origins = settings.cors_origins_list
    allow_all = origins == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials with a wildcard origin
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(questions.router)
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on the configured host and port."""
    uvicorn.run(
        "church_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
