"""Tests for request validation."""

import math

import pytest

from nutrition_calc.domain.errors import InvalidInput
from nutrition_calc.services.validation import (
    coerce_number,
    coerce_text,
    format_number,
    parse_calculation_request,
)


def test_parse_request_trims_food_and_coerces_target() -> None:
    request = parse_calculation_request({"food": "  banana ", "targetKcal": "200"})

    assert request.food == "banana"
    assert request.target_kcal == 200.0


def test_parse_request_ignores_extra_fields() -> None:
    request = parse_calculation_request(
        {"food": "rice", "targetKcal": 150.5, "unit": "g"}
    )

    assert request.target_kcal == 150.5


@pytest.mark.parametrize("target", [0, -1, -200.5, "0", "", None, "abc", [], "inf"])
def test_parse_request_rejects_bad_target(target: object) -> None:
    with pytest.raises(InvalidInput):
        parse_calculation_request({"food": "banana", "targetKcal": target})


@pytest.mark.parametrize("food", ["", "   ", "\t\n", None, False, 0])
def test_parse_request_rejects_empty_food(food: object) -> None:
    with pytest.raises(InvalidInput):
        parse_calculation_request({"food": food, "targetKcal": 200})


@pytest.mark.parametrize("payload", [None, [], "banana", 42])
def test_parse_request_rejects_non_object_body(payload: object) -> None:
    with pytest.raises(InvalidInput) as exc_info:
        parse_calculation_request(payload)

    assert exc_info.value.status_code == 400
    assert exc_info.value.to_payload() == {
        "error": "Provide 'food' and 'targetKcal' > 0"
    }


def test_coerce_text_renders_scalars() -> None:
    assert coerce_text(True) == "true"
    assert coerce_text(42) == "42"
    assert coerce_text(42.0) == "42"
    assert coerce_text(1.5) == "1.5"


def test_coerce_number_follows_loose_rules() -> None:
    assert coerce_number(None) == 0.0
    assert coerce_number(True) == 1.0
    assert coerce_number(" 12.5 ") == 12.5
    assert coerce_number("") == 0.0
    assert math.isnan(coerce_number("twelve"))
    assert math.isnan(coerce_number({"value": 1}))
    assert coerce_number(10**400) == math.inf


def test_format_number_drops_integral_fraction() -> None:
    assert format_number(200.0) == "200"
    assert format_number(200.5) == "200.5"
