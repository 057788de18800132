"""Request validation with loose JSON value coercion."""

import math

from nutrition_calc.domain.calculation import CalculationRequest
from nutrition_calc.domain.errors import InvalidInput

# Integral floats at or above this magnitude keep exponent notation.
_MAX_PLAIN_INTEGER = 1e21


def parse_calculation_request(payload: object) -> CalculationRequest:
    """Extract and validate food and targetKcal from a decoded request body."""
    body = payload if isinstance(payload, dict) else {}
    food = coerce_text(body.get("food"))
    target_kcal = coerce_number(body.get("targetKcal"))
    if not food or not math.isfinite(target_kcal) or target_kcal <= 0:
        raise InvalidInput
    return CalculationRequest(food=food, target_kcal=target_kcal)


def coerce_text(value: object) -> str:
    """Coerce a JSON value to trimmed text, treating falsy values as empty."""
    if value is None or value is False:
        return ""
    if value is True:
        return "true"
    if isinstance(value, int | float):
        return "" if value == 0 else format_number(value)
    return str(value).strip()


def coerce_number(value: object) -> float:
    """Coerce a JSON value to a float; unparseable values become NaN."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, int | float):
        try:
            return float(value)
        except OverflowError:
            return math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def format_number(value: float) -> str:
    """Render a number the way it reads in text: 200 rather than 200.0."""
    number = float(value)
    if number.is_integer() and abs(number) < _MAX_PLAIN_INTEGER:
        return str(int(number))
    return repr(number)
