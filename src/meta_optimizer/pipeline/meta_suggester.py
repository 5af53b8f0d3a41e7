"""Meta suggester: asks Claude for an analysis and optimized meta tags."""

from __future__ import annotations

import asyncio
import logging

from pydantic import ValidationError

from meta_optimizer.clients.llm_client import DEFAULT_MODEL, LLMClient
from meta_optimizer.errors import MalformedResponseError, UpstreamError
from meta_optimizer.models.constraints import META_DESCRIPTION, META_TITLE
from meta_optimizer.models.suggestion import SuggestionResult
from meta_optimizer.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are an SEO specialist who reviews HTML meta titles and meta descriptions.

Respond with a single JSON object and nothing else, using exactly these keys:
{
  "analysis": "Brief analysis of the provided meta title and description.",
  "optimizedTitle": "An optimized meta title under {title_max} characters.",
  "optimizedDescription": "An optimized meta description under {description_max} characters."
}

All three keys are required and every value is a string."""


def build_prompt(
    title: str,
    description: str,
    title_max: int = META_TITLE.maximum,
    description_max: int = META_DESCRIPTION.maximum,
) -> str:
    """Build the user instruction for one optimization request."""
    return f"""Analyze the following meta title and meta description for SEO best practices, focusing on length and engagement.
Current Meta Title: "{title}" (Length: {len(title)})
Current Meta Description: "{description}" (Length: {len(description)})

The optimal meta title length is under {title_max} characters.
The optimal meta description length is under {description_max} characters.

Based on this, please provide:
1. A brief analysis of the current title and description, highlighting what's good and what could be improved.
2. An optimized meta title that is concise, engaging, and within the character limit.
3. An optimized meta description that is compelling, informative, and within the character limit.

Return the response as a JSON object."""


class MetaSuggester:
    """Request optimized meta title/description suggestions for the current form values."""

    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        *,
        timeout: float = 30.0,
        temperature: float = 0.3,
        max_tokens: int = 1024,
        title_max: int = META_TITLE.maximum,
        description_max: int = META_DESCRIPTION.maximum,
    ):
        self.llm = llm
        self.model = model
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.title_max = title_max
        self.description_max = description_max

    async def request_suggestions(self, title: str, description: str) -> SuggestionResult:
        """Send one request and return the parsed suggestion.

        Raises UpstreamError when the call itself fails or times out, and
        MalformedResponseError when the reply is not the expected object.
        """
        prompt = build_prompt(title, description, self.title_max, self.description_max)
        system = SYSTEM_PROMPT.replace("{title_max}", str(self.title_max)).replace(
            "{description_max}", str(self.description_max)
        )

        try:
            response = await asyncio.wait_for(
                self.llm.generate(
                    prompt=prompt,
                    system=system,
                    model=self.model,
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            logger.error("Suggestion request timed out after %.1fs", self.timeout)
            raise UpstreamError() from exc
        except Exception as exc:
            logger.exception("Error fetching suggestions from the LLM")
            raise UpstreamError() from exc

        return self._parse_result(response.text)

    @staticmethod
    def _parse_result(text: str) -> SuggestionResult:
        """Parse and validate the reply text into a SuggestionResult."""
        try:
            data = extract_json(text)
            return SuggestionResult.model_validate(data)
        except (ValueError, ValidationError) as exc:
            logger.warning("Malformed suggestion reply (%s): %.200s", exc.__class__.__name__, text)
            raise MalformedResponseError() from exc
