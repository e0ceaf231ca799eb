"""Health check routes."""

from fastapi import APIRouter

from core.building_gen import TEMPLATES

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "templates": len(TEMPLATES)}
