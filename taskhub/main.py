"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See taskhub.core.lifespan and
taskhub.core.exception_handlers.

Settings are resolved inside create_app() so tests can pass their own
Settings (or set env and call get_settings.cache_clear()) before building
the app.
"""

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from taskhub.api.v1 import api_router
from taskhub.core.config import Settings, get_settings
from taskhub.core.exception_handlers import register_exception_handlers
from taskhub.core.lifespan import create_lifespan
from taskhub.middleware import RequestIDMiddleware
from taskhub.pages import render_root_page
from taskhub.shared.telemetry import TelemetryConfig, setup_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings)
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    app.state.settings = settings
    app.state.telemetry = None
    if settings.telemetry_enabled:
        telemetry = TelemetryConfig.from_settings(settings)
        telemetry.instrument_app(app)
        app.state.telemetry = telemetry

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: request ID -> CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def root() -> HTMLResponse:
        """Single-page task client."""
        return HTMLResponse(content=render_root_page(settings.app_name, settings.api_prefix))

    return app


def run() -> None:
    """Console entry point: serve the app with Uvicorn on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(
        "taskhub.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
