"""Console entrypoint that serves the API with uvicorn."""

import logging

import uvicorn

from nutrition_calc.app_logging import configure_logging
from nutrition_calc.config import Settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the HTTP server on the configured host and port."""
    settings = Settings()
    configure_logging(settings.log_level)
    logger.info("API listening on %s", settings.port)
    uvicorn.run(
        "nutrition_calc.api.asgi:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
