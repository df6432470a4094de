"""FastAPI application entry point for the SWAPI demo server."""

import logging
import sys

from fastapi import FastAPI, Request, Response

from config import Settings, settings
from errors import register_error_handlers
from services.context import AppContext

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    app = FastAPI(title="SWAPI Demo", version="1.0.0", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.context = AppContext(settings=app_settings)

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if app_settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.pages import router as pages_router
    from routes.stats import router as stats_router
    from routes.swapi import router as swapi_router

    app.include_router(pages_router)
    app.include_router(swapi_router)
    app.include_router(stats_router)

    return app


app = create_app()
