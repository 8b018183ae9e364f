"""
FastAPI Application Entry Point

This module initializes the FastAPI application and configures:
- The root dependency container (models, services, shared libraries)
- API routes
- Middleware (logging, CORS) and error handlers
- Application metadata
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.api import endpoints
from app.core.exceptions import DatabaseError, DependencyNotFoundError, NotFoundError
from app.core.providers import build_container
from app.core.rate_limit import limiter
from app.core.setting import settings
from app.db.session import engine, init_db
from app.middleware.logging import add_logging_middleware, configure_logging

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Forum Service",
    description="Q&A forum API: users, questions, answers, comments and votes",
    version="1.0.0",
    docs_url="/docs",  # Swagger UI documentation
    redoc_url="/redoc",  # ReDoc documentation
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

add_logging_middleware(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(DependencyNotFoundError)
async def dependency_not_found_handler(request: Request, exc: DependencyNotFoundError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )


@app.exception_handler(DatabaseError)
async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)}
    )


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}


app.include_router(endpoints.router)

app.state.container = build_container(router=app.router)


@app.on_event("startup")
async def startup_event():
    """Create missing tables when enabled."""
    if settings.AUTO_CREATE_TABLES:
        await init_db()


@app.on_event("shutdown")
async def shutdown_event():
    """Release pooled database connections."""
    await engine.dispose()
    logger.info("Database engine disposed")
