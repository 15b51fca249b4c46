"""
Pin Map API - Main Application Entry Point.

FastAPI application serving pins, tags, the region boundary and map
settings as JSON under the /api prefix.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pinmap import __version__
from pinmap.api.router import api_router
from pinmap.config import get_settings
from pinmap.core.exceptions import PinMapException

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Creates tables and seeds sample data when configured to.
    """
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"Admin token required: {bool(settings.ADMIN_TOKEN)}")

    from pinmap.db.init import create_tables, initialize_database
    from pinmap.db.session import AsyncSessionLocal, engine, is_using_sqlite_fallback

    if is_using_sqlite_fallback():
        logger.warning("[DEV MODE] Using SQLite fallback database")
    else:
        logger.info("Database: PostgreSQL")

    if settings.AUTO_CREATE_TABLES:
        async with engine.begin() as conn:
            await create_tables(conn)
        logger.info("Database tables ready")

    if settings.SEED_DATABASE:
        try:
            async with AsyncSessionLocal() as session:
                await initialize_database(session)
                await session.commit()
        except Exception:
            logger.exception("Failed to seed database")

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}")
    await engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## Pin Map API

CRUD API behind a map-based content browser.

### Resources
- **Pins**: geolocated content with a main tag, supporting tags and content blocks
- **Tags**: named, colored classifications
- **Boundary**: optional polygon marking the area of interest
- **Settings**: default map view and list view configuration
    """,
    version=__version__,
    openapi_tags=[
        {"name": "pins", "description": "Pin management"},
        {"name": "tags", "description": "Tag definitions"},
        {"name": "boundary", "description": "Region boundary"},
        {"name": "settings", "description": "Map settings"},
        {"name": "health", "description": "Service health checks"},
    ],
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PinMapException)
async def pinmap_exception_handler(request: Request, exc: PinMapException) -> JSONResponse:
    """Render API exceptions as {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report malformed request bodies as 400 with a field-specific message,
    e.g. "position: Field required".
    """
    messages = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            messages.append("Request body is not valid JSON")
            continue
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc)
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])

    return JSONResponse(
        status_code=400,
        content={"error": "; ".join(messages) or "Invalid request"},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error but returns a sanitized response.
    """
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred"},
    )


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint describing the API."""
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs",
        "api": settings.API_PREFIX,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pinmap.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
