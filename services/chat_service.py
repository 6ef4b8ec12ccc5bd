"""
Chat service containing the conversational assistant logic.
Builds the upstream message list from the persona prompt, recent history and the new message.
"""
from typing import Optional, Sequence

from models.api_models import ChatRequest, Message
from models.chat_models import CompletionOptions
from services.completion_client import CompletionClient
from utils.constants import CHAT_SYSTEM_PROMPT
from utils.logger import app_logger


class ChatService:
    """Service for handling chat logic."""

    MAX_HISTORY_MESSAGES = 6  # 3 user/assistant exchanges

    def __init__(self, client: CompletionClient, options: Optional[CompletionOptions] = None,
                 max_history_messages: int = MAX_HISTORY_MESSAGES):
        self.client = client
        self.options = options
        self.max_history_messages = max_history_messages

    @staticmethod
    def recent_history(history: Optional[Sequence[Message]], limit: int = MAX_HISTORY_MESSAGES) -> list[Message]:
        """Keep the last `limit` history entries in their original order."""
        if not history or limit <= 0:
            return []
        return list(history[-limit:])

    @staticmethod
    def prepare_messages(request: ChatRequest, max_history_messages: int = MAX_HISTORY_MESSAGES) -> list[dict]:
        """
        Prepare a messages list for the upstream call.

        Order: persona system prompt, the most recent history entries, the new user message.
        """
        messages = [{"role": "system", "content": CHAT_SYSTEM_PROMPT}]

        history = request.conversation_history or []
        recent = ChatService.recent_history(history, max_history_messages)
        if len(recent) < len(history):
            app_logger.info(f"History truncated: {len(history)} -> {len(recent)} messages")

        messages.extend({"role": msg.role, "content": msg.content} for msg in recent)
        messages.append({"role": "user", "content": request.message})

        return messages

    async def reply(self, request: ChatRequest) -> str:
        """Generate the assistant reply for a chat request."""
        app_logger.info(
            f"Chat request: message={len(request.message)} chars, "
            f"history={len(request.conversation_history or [])} messages"
        )
        messages = self.prepare_messages(request, self.max_history_messages)
        return await self.client.complete(messages, self.options)
