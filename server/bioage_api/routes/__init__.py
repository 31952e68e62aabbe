"""API route modules."""
from .calculator import router as calculator_router
from .lead import router as lead_router

__all__ = [
    "calculator_router",
    "lead_router",
]
