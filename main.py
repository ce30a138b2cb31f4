"""
Dev server for the Block Pattern Builder plugin.

Boots the plugin against an in-process host, serves the built `public/`
folder and exposes read-only plugin routes.

    uvicorn main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from block_pattern_builder import __version__
from block_pattern_builder.config import settings
from block_pattern_builder.exception_handlers import register_exception_handlers
from block_pattern_builder.hooks import HOOK_INIT, HOOK_PLUGINS_LOADED
from block_pattern_builder.log import configure_logging
from block_pattern_builder.plugin import Plugin
from block_pattern_builder.routes import router as plugin_router

logger = logging.getLogger(__name__)


def create_app(plugin: Plugin | None = None) -> FastAPI:
    """Build the FastAPI app around a plugin (one from settings by default)."""
    plugin = plugin or Plugin.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        plugin.boot()
        plugin.host.do_action(HOOK_PLUGINS_LOADED)
        plugin.host.do_action(HOOK_INIT)
        logger.info("Serving %s from %s", plugin.settings.text_domain, plugin.path())
        yield

    app = FastAPI(title="Block Pattern Builder", version=__version__, lifespan=lifespan)
    app.state.plugin = plugin

    register_exception_handlers(app)
    app.include_router(plugin_router, prefix="/api/v1/plugin")

    public_dir = Path(plugin.path(plugin.settings.public_dir))
    if public_dir.is_dir():
        app.mount(f"/{plugin.settings.public_dir}", StaticFiles(directory=public_dir), name="public")
    else:
        logger.warning("Public directory %s not found; static assets are not served", public_dir)

    return app


configure_logging(settings.log_level, settings.log_json)

app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=settings.debug)
