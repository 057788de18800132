"""Calculation domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CalculationRequest:
    """Validated calculation input."""

    food: str
    target_kcal: float


@dataclass(frozen=True)
class CalorieEstimate:
    """Calories per 100 grams as estimated by the completion API."""

    kcal_per_100g: float


@dataclass(frozen=True)
class CalculationResult:
    """Formatted calculation output."""

    food: str
    target_kcal: int | float
    kcal_per_100g: float
    grams_for_target: float
    explanation: str
