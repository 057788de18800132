"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_calc.adapters.openai_chat_client import OpenAIChatClient
from nutrition_calc.config import Settings, resolve_api_key
from nutrition_calc.services.calculator import CalculatorService
from nutrition_calc.services.estimator import EstimatorService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    estimator_service: EstimatorService
    calculator_service: CalculatorService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    api_key = resolve_api_key(resolved_settings.openai_api_key)
    chat_client = (
        OpenAIChatClient.create(api_key, resolved_settings.openai_base_url)
        if api_key
        else None
    )
    estimator_service = EstimatorService(
        client=chat_client,
        model=resolved_settings.openai_model,
        temperature=resolved_settings.openai_temperature,
        strict_shape=resolved_settings.strict_upstream_shape,
    )
    calculator_service = CalculatorService(estimator_service)

    async def close_resources() -> None:
        if chat_client is not None:
            await chat_client.close()

    return AppContainer(
        settings=resolved_settings,
        estimator_service=estimator_service,
        calculator_service=calculator_service,
        close_resources=close_resources,
    )
