# backend/app/core/llm_client.py
import logging
from typing import Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from backend.app.config.settings import DEFAULT_MODEL, DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Missing OPENAI_API_KEY"


class MissingAPIKeyError(ValueError):
    """No OpenAI credential could be resolved for the turn."""


class UpstreamModelError(Exception):
    """The model provider call failed; the message is the provider's, verbatim."""


class LLMClient:
    """
    Wrapper around the OpenAI Responses API.

    One call per turn. SDK retries are switched off: a failed call is
    reported straight back to the caller.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        if not api_key:
            raise MissingAPIKeyError(MISSING_KEY_MESSAGE)

        self.model = model
        self.async_client: AsyncOpenAI = AsyncOpenAI(
            api_key=api_key,
            timeout=timeout,
            max_retries=0,
        )

    async def respond(self, segments: List[Dict[str, str]]) -> str:
        """Send the assembled input segments and return the raw output text."""
        try:
            response = await self.async_client.responses.create(
                model=self.model,
                input=segments,
            )
        except OpenAIError as e:
            logger.error(f"OpenAI request failed (model={self.model}): {e}")
            raise UpstreamModelError(str(e) or "OpenAI request failed") from e

        return response.output_text or ""
