"""API route modules."""
from .scoring import router as scoring_router
from .streak import router as streak_router
from .metrics import router as metrics_router

__all__ = [
    "scoring_router",
    "streak_router",
    "metrics_router",
]
