"""FastAPI application factory."""

import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from nutrition_calc.api.models import CalculationResponse, HealthResponse
from nutrition_calc.app_logging import configure_logging
from nutrition_calc.containers import AppContainer
from nutrition_calc.domain.errors import CalculationError, UnknownFailure

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    settings = container.settings
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.container = container

    @app.middleware("http")
    async def cors_and_access_log(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Answer preflights, add CORS headers and log each request."""
        start = time.perf_counter()
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        logger.info(
            "%s %s %s %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response

    @app.exception_handler(CalculationError)
    async def calculation_error_handler(
        request: Request, exc: CalculationError
    ) -> JSONResponse:
        """Render calculation errors as JSON error bodies."""
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.get("/")
    async def root() -> HealthResponse:
        """Health check with service name and version."""
        return HealthResponse(name=settings.app_name, version=settings.app_version)

    @app.post("/calculate")
    async def calculate(request: Request) -> CalculationResponse:
        """Compute grams of a food needed to reach a calorie target."""
        state_container: AppContainer = request.app.state.container
        payload = await _read_json_body(request)
        try:
            result = await state_container.calculator_service.calculate(payload)
        except CalculationError:
            raise
        except Exception as exc:
            logger.exception("Calculation failed")
            raise UnknownFailure.from_exception(exc) from exc
        return CalculationResponse.from_result(result)

    return app


async def _read_json_body(request: Request) -> object:
    """Decode the JSON body; unparseable bodies count as empty."""
    try:
        return await request.json()
    except ValueError:
        return {}
