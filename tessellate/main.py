"""Application entry point: logging, CORS and the /api routes."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tessellate import __version__
from tessellate.config import Settings, settings
from tessellate.dependencies import get_settings
from tessellate.engine import get_registry, register_plugins

load_dotenv()

logger = logging.getLogger(__name__)


def _configure_logging(app_settings: Settings) -> None:
    level = getattr(logging, app_settings.tessellate_log_level.upper(), logging.DEBUG)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def _register_plugins() -> None:
    """Import plugin modules and log the commands each one contributed."""
    register_plugins()
    registry = get_registry()
    for plugin in sorted({spec.plugin for spec in registry.all()}):
        names = ", ".join(spec.name for spec in registry.get_plugin(plugin))
        logger.info("Plugin %s: %s", plugin, names)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the app. Settings default to the environment-loaded instance."""
    app_settings = app_settings or settings
    _configure_logging(app_settings)
    _register_plugins()

    app = FastAPI(
        title="Tessellate",
        description="Diamond and hexagon tessellation commands for vector documents",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from tessellate.api.router import api_router

    app.include_router(api_router)
    if app_settings is not settings:
        app.dependency_overrides[get_settings] = lambda: app_settings
    return app


app = create_app()
