"""Errors raised while handling a calculation request."""


class CalculationError(Exception):
    """Base error that maps onto a JSON error response."""

    status_code: int = 500
    message: str = "Calculation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_payload(self) -> dict[str, object]:
        """Return the JSON body for this error."""
        return {"error": self.message}


class InvalidInput(CalculationError):
    """The client sent a missing or invalid food or target."""

    status_code = 400
    message = "Provide 'food' and 'targetKcal' > 0"


class MissingCredential(CalculationError):
    """No OpenAI API key is configured."""

    message = "Missing OPENAI_API_KEY"


class UpstreamError(CalculationError):
    """The completion API answered with a non-success status."""

    def __init__(self, status_code: int, text: str) -> None:
        super().__init__(f"OpenAI {status_code}: {text}")
        self.upstream_status = status_code
        self.upstream_text = text


class UpstreamShapeError(CalculationError):
    """The completion payload lacks choices[0].message.content."""

    message = "openai_unexpected_shape"


class UpstreamMalformedJSON(CalculationError):
    """The completion content is not parseable JSON."""

    message = "openai_invalid_json"

    def __init__(self, raw: str) -> None:
        super().__init__()
        self.raw = raw

    def to_payload(self) -> dict[str, object]:
        """Return the error body with the raw completion attached."""
        return {"error": self.message, "raw": self.raw}


class InvalidEstimate(CalculationError):
    """The parsed kcal_per_100g is missing, non-numeric or not positive."""

    message = "Invalid kcal_per_100g"


class UnknownFailure(CalculationError):
    """Any other failure, surfaced with its message."""

    @classmethod
    def from_exception(cls, exc: BaseException) -> "UnknownFailure":
        """Wrap an arbitrary exception, falling back to its type name."""
        return cls(str(exc) or type(exc).__name__)
