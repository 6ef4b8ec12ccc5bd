"""
Pydantic data models for API requests and responses.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """Chat message model."""
    role: str  # "system", "user" or "assistant"
    content: str


class ChatRequest(BaseModel):
    """Chat request model with caller-supplied conversation history."""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    conversation_history: Optional[List[Message]] = Field(None, alias="conversationHistory")


class ChatResponse(BaseModel):
    reply: str


class BudgetRequest(BaseModel):
    """Budget request; presence of each field is checked by the handler so a missing one yields 400."""
    city: Optional[str] = None
    country: Optional[str] = None
    profile: Optional[str] = Field(None, description="Free-text household label, e.g. solo, couple, family, business")


class LoginResponse(BaseModel):
    token: str


class HealthResponse(BaseModel):
    status: str = "healthy"
