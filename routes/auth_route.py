"""
Route handlers for demo login.
"""
from fastapi import APIRouter, Request
from models.api_models import LoginResponse
from utils.logger import app_logger

router = APIRouter()


@router.post("/api/login", response_model=LoginResponse)
async def login(request: Request):
    """Issue a token for the fixed demo subject. The request body is ignored."""
    config = request.app.state.config
    token = request.app.state.token_service.issue(config.demo_subject)
    app_logger.info(f"Issued token for {config.demo_subject}")
    return LoginResponse(token=token)
