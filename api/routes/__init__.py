"""API Routes"""

from . import generate, health

__all__ = ["generate", "health"]
