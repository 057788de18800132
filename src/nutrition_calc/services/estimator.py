"""Calorie estimation service using a chat-completion LLM."""

import json
import logging
import math
from dataclasses import dataclass
from typing import Protocol

from nutrition_calc.domain.calculation import CalorieEstimate
from nutrition_calc.domain.errors import (
    InvalidEstimate,
    MissingCredential,
    UpstreamMalformedJSON,
    UpstreamShapeError,
)
from nutrition_calc.services.validation import coerce_number

ESTIMATE_KEY = "kcal_per_100g"

SYSTEM_PROMPT = (
    "You are a nutrition assistant. Estimate realistic calories per 100g for a "
    "given common food (no brands). If ambiguous, assume the most common "
    "preparation. Return ONLY compact JSON."
)

_logger = logging.getLogger(__name__)


class ChatCompletionClient(Protocol):
    """Interface for a single chat-completion call."""

    async def complete(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[dict[str, str]],
    ) -> dict[str, object]:
        """Return the raw chat-completion payload."""


@dataclass
class EstimatorService:
    """Service that prompts for kcal/100g and validates the answer.

    ``client`` is ``None`` when no API key is configured; the missing
    credential is reported per request rather than at startup.
    """

    client: ChatCompletionClient | None
    model: str
    temperature: float
    strict_shape: bool = True

    async def estimate(self, food: str) -> CalorieEstimate:
        """Estimate calories per 100 grams for a food description."""
        if self.client is None:
            raise MissingCredential
        payload = await self.client.complete(
            model=self.model,
            temperature=self.temperature,
            messages=build_messages(food),
        )
        content = extract_content(payload, strict=self.strict_shape)
        return parse_estimate(content)


def build_messages(food: str) -> list[dict[str, str]]:
    """Build the system/user prompt pair for a food."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": f"Food: {food}\nReturn JSON with key: {ESTIMATE_KEY} (number).",
        },
    ]


def extract_content(payload: object, *, strict: bool = True) -> str:
    """Return choices[0].message.content from a completion payload.

    In non-strict mode a missing content falls back to ``"{}"``, which later
    fails as an invalid estimate.
    """
    content = _content_or_none(payload)
    if content is not None:
        return content
    if strict:
        _logger.warning("OpenAI response missing choices[0].message.content")
        raise UpstreamShapeError
    return "{}"


def parse_estimate(content: str) -> CalorieEstimate:
    """Parse completion content and validate kcal_per_100g."""
    try:
        parsed = json.loads(content, parse_constant=_reject_constant)
    except ValueError as exc:
        _logger.warning("OpenAI returned invalid JSON: %r", content)
        raise UpstreamMalformedJSON(content) from exc

    value = parsed.get(ESTIMATE_KEY) if isinstance(parsed, dict) else None
    per100 = coerce_number(value) if value is not None else math.nan
    if not math.isfinite(per100) or per100 <= 0:
        _logger.warning("OpenAI returned invalid %s: %r", ESTIMATE_KEY, value)
        raise InvalidEstimate
    return CalorieEstimate(kcal_per_100g=per100)


def _content_or_none(payload: object) -> str | None:
    if not isinstance(payload, dict):
        return None
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else None


def _reject_constant(name: str) -> float:
    """Reject NaN and Infinity literals, which are not valid JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")
