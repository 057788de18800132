"""HTTP response models."""

from pydantic import BaseModel, ConfigDict, Field

from nutrition_calc.domain.calculation import CalculationResult


class HealthResponse(BaseModel):
    """Service identity returned by the root endpoint."""

    ok: bool = True
    name: str
    version: str


class CalculationResponse(BaseModel):
    """Body returned by POST /calculate."""

    model_config = ConfigDict(populate_by_name=True)

    food: str
    target_kcal: int | float = Field(alias="targetKcal")
    kcal_per_100g: float
    grams_for_target: float
    explanation: str

    @classmethod
    def from_result(cls, result: CalculationResult) -> "CalculationResponse":
        """Build the response body from a calculation result."""
        return cls(
            food=result.food,
            target_kcal=result.target_kcal,
            kcal_per_100g=result.kcal_per_100g,
            grams_for_target=result.grams_for_target,
            explanation=result.explanation,
        )
