"""
Upstream completion client.
Thin adapter over the OpenAI chat completions API, one instance per credential profile.
"""
import time
from typing import Optional

import httpx
import openai

from config import UpstreamProfile
from models.chat_models import CompletionOptions
from utils.errors import UpstreamError
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


class CompletionClient:
    """Sends role-tagged messages upstream and returns the generated text."""

    def __init__(self, profile: UpstreamProfile, client: Optional[openai.AsyncOpenAI] = None):
        self.profile = profile
        self._client = client or openai.AsyncOpenAI(
            api_key=profile.api_key,
            base_url=profile.base_url,
            max_retries=0,
            timeout=profile.timeout,
            http_client=HTTPClientManager.get_client(profile.name, profile.timeout),
        )

    @property
    def name(self) -> str:
        return self.profile.name

    async def complete(self, messages: list[dict], options: Optional[CompletionOptions] = None) -> str:
        """
        Run one chat completion.

        Args:
            messages: Ordered list of {"role", "content"} dicts
            options: Model, output cap and temperature; defaults to the profile's

        Returns:
            Generated text of the first choice

        Raises:
            UpstreamError: transport failure, non-success status or empty response
        """
        options = options or self.profile.options

        params = {
            "model": options.model,
            "messages": messages,
            "max_tokens": options.max_tokens,
        }
        if options.temperature is not None:
            params["temperature"] = options.temperature

        app_logger.info(f"[{self.name}] Calling {options.model} with {len(messages)} messages")
        started = time.perf_counter()

        try:
            completion = await self._client.chat.completions.create(**params)
        except (openai.APIError, httpx.HTTPError) as e:
            app_logger.error(f"[{self.name}] Upstream call failed: {type(e).__name__}: {e}")
            raise UpstreamError(f"{self.name} completion failed") from e

        elapsed = time.perf_counter() - started

        if not completion.choices:
            app_logger.error(f"[{self.name}] Upstream returned no choices")
            raise UpstreamError(f"{self.name} completion returned no choices")

        content = completion.choices[0].message.content or ""
        app_logger.info(f"[{self.name}] Completed in {elapsed:.2f}s: {len(content)} characters")
        return content
