"""Gram calculation and response formatting."""

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from nutrition_calc.domain.calculation import (
    CalculationRequest,
    CalculationResult,
    CalorieEstimate,
)
from nutrition_calc.services.estimator import EstimatorService
from nutrition_calc.services.validation import format_number, parse_calculation_request

_FIXED_NOTATION_LIMIT = 1e21

_logger = logging.getLogger(__name__)


@dataclass
class CalculatorService:
    """Turns a request body into a gram quantity for a calorie target."""

    estimator_service: EstimatorService

    async def calculate(self, payload: object) -> CalculationResult:
        """Validate the payload, estimate kcal/100g and compute grams."""
        request = parse_calculation_request(payload)
        estimate = await self.estimator_service.estimate(request.food)
        result = build_result(request, estimate)
        _logger.info(
            "Calculated %s g of %s for %s kcal",
            result.grams_for_target,
            request.food,
            format_number(request.target_kcal),
        )
        return result


def grams_for_target(target_kcal: float, kcal_per_100g: float) -> float:
    """Return the grams of food that provide target_kcal."""
    return target_kcal * (100 / kcal_per_100g)


def build_result(
    request: CalculationRequest, estimate: CalorieEstimate
) -> CalculationResult:
    """Round the estimate and gram amount and compose the explanation."""
    per100 = estimate.kcal_per_100g
    grams = grams_for_target(request.target_kcal, per100)
    target = request.target_kcal
    explanation = (
        f"≈ {to_fixed(grams, 0)} g {request.food} to reach "
        f"{format_number(target)} kcal at ~{to_fixed(per100, 0)} kcal/100g."
    )
    return CalculationResult(
        food=request.food,
        target_kcal=int(target) if target.is_integer() else target,
        kcal_per_100g=float(to_fixed(per100, 1)),
        grams_for_target=float(to_fixed(grams, 1)),
        explanation=explanation,
    )


def to_fixed(value: float, digits: int) -> str:
    """Format with a fixed number of decimals, rounding exact halves up."""
    if abs(value) >= _FIXED_NOTATION_LIMIT:
        return format_number(value)
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
