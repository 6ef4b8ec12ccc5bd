"""
Route handlers for the conversational assistant.
Handles the /api/chat endpoint.
"""
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from models.api_models import ChatRequest, ChatResponse
from utils.cancellation import run_until_disconnected
from utils.errors import UpstreamError
from utils.logger import app_logger

router = APIRouter()


@router.post("/api/chat", response_model=ChatResponse)
async def chat(body: ChatRequest, request: Request):
    """
    Chat endpoint with bounded conversation history.
    """
    chat_service = request.app.state.chat_service
    app_logger.info(f"Chat request from {request.state.user}")

    try:
        reply = await run_until_disconnected(request, chat_service.reply(body))
    except UpstreamError as e:
        app_logger.error(f"OpenAI error: {e.message} ({e.__cause__!r})")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "OpenAI error"},
        )

    return ChatResponse(reply=reply)
