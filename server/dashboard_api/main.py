"""Mood Dashboard API - FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mood_analytics.vocabulary import UnknownMoodKind

from .config import get_settings
from .routes import moods, stats
from .services.error_reporter import report_configuration_error

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title="Mood Dashboard API",
    description="Mood logging and mood analytics for the meditation dashboard",
    version="1.0.0",
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["*"],
)

# Include routers
app.include_router(moods.router)
app.include_router(stats.router)


@app.exception_handler(UnknownMoodKind)
async def unknown_mood_handler(request: Request, exc: UnknownMoodKind):
    """Stored moods drifted from the vocabulary: report it, don't blame the user."""
    logger.error(f"[API] Mood vocabulary mismatch on {request.url.path}: {exc}")
    await report_configuration_error(
        exc, context={"path": request.url.path, "mood": exc.mood}
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Mood statistics are unavailable due to a configuration error",
            "error": "unknown_mood_kind",
            "mood": exc.mood,
        },
    )


@app.get("/health")
async def health_check():
    """Health check endpoint for the API."""
    return {"status": "healthy", "service": "mood-dashboard-api"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "server.dashboard_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
