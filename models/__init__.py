"""
Models package exports.
"""
from models.api_models import (
    Message,
    ChatRequest,
    ChatResponse,
    BudgetRequest,
    LoginResponse,
    HealthResponse,
)

__all__ = [
    'Message',
    'ChatRequest',
    'ChatResponse',
    'BudgetRequest',
    'LoginResponse',
    'HealthResponse',
]
