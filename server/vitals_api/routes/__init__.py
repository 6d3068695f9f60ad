"""API route modules."""
from .vitals import router as vitals_router
from .risks import router as risks_router
from .standards import router as standards_router

__all__ = [
    "vitals_router",
    "risks_router",
    "standards_router",
]
