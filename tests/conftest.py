"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from nutrition_calc.config import Settings
from nutrition_calc.containers import AppContainer
from nutrition_calc.services.calculator import CalculatorService
from nutrition_calc.services.estimator import ChatCompletionClient, EstimatorService


def completion_payload(content: str) -> dict[str, object]:
    """Build a minimal chat-completion payload around a content string."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@dataclass
class FakeChatClient(ChatCompletionClient):
    """Fake chat client returning a fixed payload and recording calls."""

    payload: dict[str, object] = field(
        default_factory=lambda: completion_payload(json.dumps({"kcal_per_100g": 89}))
    )
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[dict[str, str]],
    ) -> dict[str, object]:
        self.calls.append(
            {"model": model, "temperature": temperature, "messages": messages}
        )
        if self.error is not None:
            raise self.error
        return self.payload

    def respond_with(self, content: str) -> None:
        self.payload = completion_payload(content)


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def chat_client() -> FakeChatClient:
    return FakeChatClient()


def make_container(
    settings: Settings, chat_client: ChatCompletionClient | None
) -> AppContainer:
    estimator_service = EstimatorService(
        client=chat_client,
        model=settings.openai_model,
        temperature=settings.openai_temperature,
        strict_shape=settings.strict_upstream_shape,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        estimator_service=estimator_service,
        calculator_service=CalculatorService(estimator_service),
        close_resources=close_resources,
    )


@pytest.fixture
def container(settings: Settings, chat_client: FakeChatClient) -> AppContainer:
    return make_container(settings, chat_client)
