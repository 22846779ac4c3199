"""
vPIC lookup FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import vpic
from app.config import settings
from app.db import close_db, get_db
from app.errors import CodedError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    logger.info("Starting vPIC Lookup API...")
    try:
        await get_db()
        logger.info("SQLite reference store initialized")
    except Exception as e:
        logger.warning(f"SQLite initialization failed (reference lookups unavailable): {e}")

    yield

    logger.info("Shutting down vPIC Lookup API...")
    await close_db()


# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    debug=settings.debug,
    lifespan=lifespan,
)

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CodedError)
async def coded_error_handler(request: Request, exc: CodedError):
    """Render domain and provider errors as {code, message, data}."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app.include_router(vpic.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "vPIC Lookup API",
        "version": settings.api_version,
        "endpoints": {
            "search_by_vin": "/vpic/vin/{vin}",
            "years": "/vpic/years",
            "makes": "/vpic/makes?year=...",
            "models": "/vpic/models?makeId=...&year=...",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
