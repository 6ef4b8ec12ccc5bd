"""
Configuration module for the Vasco backend.
Handles environment variables and application settings.
"""
import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

from models.chat_models import CompletionOptions
from utils.errors import ConfigurationError

load_dotenv()


@dataclass(frozen=True)
class UpstreamProfile:
    """Credential and defaults for one upstream completion client."""
    name: str
    api_key: str
    model: str
    max_tokens: int
    temperature: Optional[float] = None
    timeout: float = 30.0
    base_url: Optional[str] = None

    @property
    def options(self) -> CompletionOptions:
        """Default completion options for this profile."""
        return CompletionOptions(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature
        )


@dataclass(frozen=True)
class Config:
    """Application configuration, built once at startup."""

    jwt_secret: str
    chat: UpstreamProfile
    budget: UpstreamProfile

    # Application Settings
    app_title: str = "Vasco Backend"
    port: int = 3001
    log_level: str = "INFO"
    cors_origins: list = field(default_factory=lambda: ["*"])

    # Token Settings
    token_ttl_seconds: int = 3600
    demo_subject: str = "user123"

    # Chat Settings
    max_history_messages: int = 6

    @classmethod
    def from_env(cls) -> "Config":
        """Read configuration from the process environment."""
        chat_key = os.getenv("OPENAI_API_KEY", "")
        base_url = os.getenv("OPENAI_BASE_URL") or None

        chat = UpstreamProfile(
            name="chat",
            api_key=chat_key,
            model=os.getenv("CHAT_MODEL", "gpt-3.5-turbo"),
            max_tokens=int(os.getenv("CHAT_MAX_TOKENS", "300")),
            temperature=None,
            timeout=float(os.getenv("CHAT_TIMEOUT", os.getenv("UPSTREAM_TIMEOUT", "30"))),
            base_url=base_url,
        )

        # Budget generation is billed separately; fall back to the chat key for single-key setups
        budget = UpstreamProfile(
            name="budget",
            api_key=os.getenv("OPENAI_BUDGET_API_KEY") or chat_key,
            model=os.getenv("BUDGET_MODEL", "gpt-4o-mini"),
            max_tokens=int(os.getenv("BUDGET_MAX_TOKENS", "2000")),
            temperature=float(os.getenv("BUDGET_TEMPERATURE", "0.1")),
            timeout=float(os.getenv("BUDGET_TIMEOUT", os.getenv("UPSTREAM_TIMEOUT", "60"))),
            base_url=base_url,
        )

        return cls(
            jwt_secret=os.getenv("JWT_SECRET", ""),
            chat=chat,
            budget=budget,
            port=int(os.getenv("PORT", "3001")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def missing_settings(self) -> list[str]:
        """Names of required settings that are empty."""
        missing = []
        if not self.jwt_secret:
            missing.append("JWT_SECRET")
        if not self.chat.api_key:
            missing.append("OPENAI_API_KEY")
        if not self.budget.api_key:
            missing.append("OPENAI_BUDGET_API_KEY")
        return missing

    def validate(self) -> None:
        """Abort startup when a credential or the signing secret is missing."""
        missing = self.missing_settings()
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )
