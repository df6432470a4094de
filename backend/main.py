"""Command-line entry point: `swapi-demo [--no-debug] [--timeout MS]`."""

import logging

import uvicorn

from config import settings

logger = logging.getLogger(__name__)


def run(argv: list[str] | None = None) -> None:
    settings.apply_cli_args(argv)

    # Imported after the flags are applied: the module-level app reads settings.
    from app import app  # noqa: PLC0415

    logger.info("Server running at http://localhost:%d/", settings.port)
    logger.info("Open the URL in your browser and click the button to fetch Star Wars data")
    if settings.debug:
        logger.info("Debug mode: ON")
        logger.info("Timeout: %s ms", settings.timeout_ms)

    uvicorn.run(app, host=settings.host, port=settings.port, workers=1)


if __name__ == "__main__":
    run()
