"""OpenAI Chat Completions client for calorie estimation."""

import logging
from dataclasses import dataclass

import httpx
from openai import APIStatusError, AsyncOpenAI

from nutrition_calc.domain.errors import UpstreamError
from nutrition_calc.services.estimator import ChatCompletionClient

_logger = logging.getLogger(__name__)


@dataclass
class OpenAIChatClient(ChatCompletionClient):
    """Chat client backed by the OpenAI Chat Completions API."""

    client: AsyncOpenAI

    @classmethod
    def create(
        cls,
        api_key: str,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
    ) -> "OpenAIChatClient":
        """Create a client that makes exactly one attempt per call."""
        return cls(
            client=AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                max_retries=0,
                http_client=http_client,
            )
        )

    async def complete(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[dict[str, str]],
    ) -> dict[str, object]:
        """Call chat completions and return the undecoded JSON payload."""
        try:
            raw = await self.client.chat.completions.with_raw_response.create(
                model=model,
                temperature=temperature,
                messages=messages,
            )
        except APIStatusError as exc:
            text = exc.response.text
            _logger.warning("OpenAI returned %s: %s", exc.status_code, text)
            raise UpstreamError(exc.status_code, text) from exc
        return raw.http_response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
