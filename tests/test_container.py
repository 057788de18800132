"""Tests for container wiring."""

import asyncio

from nutrition_calc.adapters.openai_chat_client import OpenAIChatClient
from nutrition_calc.config import Settings
from nutrition_calc.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.estimator_service.client, OpenAIChatClient)
    assert container.estimator_service.model == "gpt-4o-mini"
    assert container.calculator_service.estimator_service is (
        container.estimator_service
    )
    asyncio.run(container.close_resources())


def test_build_container_without_api_key_defers_failure() -> None:
    container = build_container(Settings(openai_api_key="   "))

    assert container.estimator_service.client is None
    asyncio.run(container.close_resources())
