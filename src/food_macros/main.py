"""Command-line entrypoint that serves the API with uvicorn."""

import logging

import uvicorn

from food_macros.api.app import create_app
from food_macros.app_logging import configure_logging
from food_macros.config import Settings
from food_macros.containers import build_container


def main() -> None:
    """Build the app from settings and serve it."""
    settings = Settings()
    configure_logging(settings.log_level)
    app = create_app(build_container(settings))
    logging.getLogger(__name__).info("Starting server on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
