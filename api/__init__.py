"""REST routers for interviews and heuristic evaluators."""
from .ai import router as ai_router
from .interviews import router as interviews_router

__all__ = ["ai_router", "interviews_router"]
