"""API route modules."""
from .moods import router as moods_router
from .stats import router as stats_router

__all__ = [
    "moods_router",
    "stats_router",
]
