"""
Data models for upstream completion calls.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CompletionOptions:
    """Per-call options sent to the upstream completion API."""
    model: str
    max_tokens: int
    temperature: Optional[float] = None
