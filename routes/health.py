"""
Liveness endpoints.
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from models.api_models import HealthResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root():
    """Root endpoint - confirms the server is running."""
    return "Vasco backend is online and ready."


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint for the hosting platform."""
    return HealthResponse()
