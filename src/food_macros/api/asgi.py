"""ASGI entrypoint for the food macros API."""

from food_macros.api.app import create_app
from food_macros.containers import build_container

app = create_app(build_container())
