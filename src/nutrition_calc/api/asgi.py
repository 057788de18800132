"""ASGI entrypoint for the nutrition calc API."""

from nutrition_calc.api.app import create_app
from nutrition_calc.containers import build_container

app = create_app(build_container())
