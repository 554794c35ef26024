"""aiohttp server for genericfile.

Application factory and route registration for the path inspection API.
"""

import logging

from aiohttp import web

from genericfile.api.paths import create_paths_routes
from genericfile.app_keys import config_key
from genericfile.config import Config

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    app[config_key] = config
    app.router.add_routes(create_paths_routes())
    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving on {config.server.host}:{config.server.port}")
    web.run_app(app, host=config.server.host, port=config.server.port)
