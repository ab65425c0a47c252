# src/morse_messenger/main.py
"""Main entry point for the Morse Messenger application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from morse_messenger.api.v1 import (
    accounts_router,
    auth_router,
    chat_requests_router,
    messages_router,
    morse_router,
)
from morse_messenger.core.errors import MessengerError
from morse_messenger.core.settings import settings
from morse_messenger.db.session import create_tables

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Morse Messenger API",
    description="Consent-gated messaging with Morse-encoded message bodies",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(auth_router, prefix="/api/v1")
app.include_router(accounts_router, prefix="/api/v1")
app.include_router(chat_requests_router, prefix="/api/v1")
app.include_router(messages_router, prefix="/api/v1")
app.include_router(morse_router, prefix="/api/v1")


@app.exception_handler(MessengerError)
async def messenger_error_handler(request: Request, exc: MessengerError) -> JSONResponse:
    """Render domain errors as ``{"detail", "code"}`` with the error's status."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
    )


@app.on_event("startup")
async def on_startup() -> None:
    if settings.auto_create_tables:
        create_tables()
        logger.info("Database tables ensured")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Consent-gated messaging with Morse-encoded message bodies",
        "docs": "/docs",
        "redoc": "/redoc"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("morse_messenger.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
