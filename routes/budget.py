"""
Route handlers for structured budget estimates.
Handles the /api/budget endpoint.
"""
from typing import Optional
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from models.api_models import BudgetRequest
from utils.cancellation import run_until_disconnected
from utils.errors import UpstreamError, InvalidUpstreamFormat
from utils.logger import app_logger

router = APIRouter()


@router.post("/api/budget")
async def budget(request: Request, body: Optional[BudgetRequest] = None):
    """
    Budget endpoint returning the parsed JSON produced upstream.
    Missing fields raise BadRequest, handled by the application error handler.
    """
    budget_service = request.app.state.budget_service

    try:
        result = await run_until_disconnected(request, budget_service.estimate(body or BudgetRequest()))
    except InvalidUpstreamFormat:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Invalid JSON response from OpenAI"},
        )
    except UpstreamError as e:
        app_logger.error(f"Budget calculation error: {e.message} ({e.__cause__!r})")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Budget calculation failed"},
        )

    return JSONResponse(content=result)
