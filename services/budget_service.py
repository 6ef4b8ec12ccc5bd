"""
Budget service for structured monthly cost-of-living estimates.
Renders the JSON-schema prompt, calls the structured upstream profile and parses its output.
"""
import json
import re
from typing import Any, Optional

from models.api_models import BudgetRequest
from models.chat_models import CompletionOptions
from services.completion_client import CompletionClient
from utils.constants import (
    BUDGET_SYSTEM_PROMPT,
    BUDGET_PROMPT_TEMPLATE,
    BUDGET_CATEGORIES,
    PROFILE_MULTIPLIERS,
)
from utils.errors import BadRequest, InvalidUpstreamFormat
from utils.logger import app_logger


class BudgetService:
    """Service for generating budget estimates."""

    REQUIRED_FIELDS = ("city", "country", "profile")

    # Leading ```json / ``` and trailing ``` markers
    OPENING_FENCE = re.compile(r'^```[a-zA-Z]*\s*')
    CLOSING_FENCE = re.compile(r'\s*```$')

    # Relative deviation tolerated between amountLocal and amountUSD * exchangeRate
    RATE_TOLERANCE = 0.05

    def __init__(self, client: CompletionClient, options: Optional[CompletionOptions] = None):
        self.client = client
        self.options = options

    @classmethod
    def validate_request(cls, request: BudgetRequest) -> tuple[str, str, str]:
        """Return (city, country, profile) or raise BadRequest if any is missing."""
        values = {name: (getattr(request, name) or "").strip() for name in cls.REQUIRED_FIELDS}
        missing = [name for name, value in values.items() if not value]
        if missing:
            app_logger.warning(f"Budget request missing fields: {', '.join(missing)}")
            raise BadRequest("Missing required fields: city, country, profile")

        return values["city"], values["country"], values["profile"]

    @staticmethod
    def _format_categories() -> str:
        blocks = []
        for category, items in BUDGET_CATEGORIES.items():
            sub_elements = ",\n".join(
                f'        {{"name": "{item}", "amountUSD": <number>, "amountLocal": <number>}}'
                for item in items
            )
            blocks.append(
                f'    {{\n      "name": "{category}",\n      "subElements": [\n{sub_elements}\n      ]\n    }}'
            )
        return ",\n".join(blocks)

    @staticmethod
    def build_prompt(city: str, country: str, profile: str) -> str:
        """Render the structured-output instruction for one location and profile."""
        multipliers = ", ".join(f"{name}={factor:g}x" for name, factor in PROFILE_MULTIPLIERS.items())
        return BUDGET_PROMPT_TEMPLATE.format(
            city=city,
            country=country,
            profile=profile,
            multipliers=multipliers,
            categories=BudgetService._format_categories(),
            category_count=len(BUDGET_CATEGORIES),
        )

    @staticmethod
    def prepare_messages(city: str, country: str, profile: str) -> list[dict]:
        return [
            {"role": "system", "content": BUDGET_SYSTEM_PROMPT},
            {"role": "user", "content": BudgetService.build_prompt(city, country, profile)},
        ]

    @classmethod
    def strip_code_fences(cls, text: str) -> str:
        """Remove surrounding whitespace and Markdown code-fence markers."""
        cleaned = text.strip()
        while True:
            stripped = cls.CLOSING_FENCE.sub('', cls.OPENING_FENCE.sub('', cleaned)).strip()
            if stripped == cleaned:
                return cleaned
            cleaned = stripped

    @staticmethod
    def _reject_constant(name: str):
        raise ValueError(f"non-finite number {name}")

    @classmethod
    def parse_response(cls, text: str) -> Any:
        """
        Parse upstream text as JSON after fence stripping.

        Raises:
            InvalidUpstreamFormat: text is not valid JSON or holds non-finite numbers
        """
        cleaned = cls.strip_code_fences(text)
        try:
            budget = json.loads(cleaned, parse_constant=cls._reject_constant)
            # Overflowing literals such as 1e400 parse to inf and cannot be sent back
            json.dumps(budget, allow_nan=False)
        except ValueError as e:
            app_logger.error(f"Budget response is not valid JSON ({e}): {text!r}")
            raise InvalidUpstreamFormat() from e

        return budget

    @classmethod
    def find_rate_mismatches(cls, budget: Any) -> list[str]:
        """
        List sub-items whose amountLocal is off from amountUSD * exchangeRate.

        Only reports; the budget returned to the caller is never modified.
        """
        if not isinstance(budget, dict):
            return []

        rate = budget.get("exchangeRate")
        if not isinstance(rate, (int, float)) or isinstance(rate, bool) or rate <= 0:
            return []

        mismatches = []
        for category in budget.get("categories") or []:
            if not isinstance(category, dict):
                continue
            for item in category.get("subElements") or []:
                if not isinstance(item, dict):
                    continue
                usd, local = item.get("amountUSD"), item.get("amountLocal")
                if not all(isinstance(v, (int, float)) for v in (usd, local)):
                    continue
                try:
                    expected = usd * rate
                    mismatched = abs(local - expected) > max(abs(expected) * cls.RATE_TOLERANCE, 1)
                except OverflowError:
                    continue
                if mismatched:
                    mismatches.append(f"{category.get('name')}/{item.get('name')}")

        return mismatches

    async def estimate(self, request: BudgetRequest) -> Any:
        """Produce the parsed budget structure for a request."""
        city, country, profile = self.validate_request(request)
        app_logger.info(f"Budget request: city={city}, country={country}, profile={profile}")

        raw = await self.client.complete(self.prepare_messages(city, country, profile), self.options)
        budget = self.parse_response(raw)

        mismatches = self.find_rate_mismatches(budget)
        if mismatches:
            app_logger.warning(
                f"Budget for {city}, {country}: {len(mismatches)} items inconsistent with exchange rate: "
                f"{', '.join(mismatches[:5])}"
            )

        return budget
