"""aiohttp server for Textwiki.

Application factory and route registration.
"""

import logging

from aiohttp import web

from textwiki.api.pages import create_pages_routes
from textwiki.app_keys import renderer_key, store_key, validator_key
from textwiki.assets import get_templates_dir
from textwiki.config import Config
from textwiki.core.store import PageStore
from textwiki.core.templates import TemplateRenderer
from textwiki.core.titles import TitleValidator

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    The store, validator and renderer are constructed here and owned by the
    application; handlers reach them through app keys.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        RenderError: If a template cannot be loaded
    """
    app = web.Application()

    templates_dir = config.templates.dir or get_templates_dir()

    app[store_key] = PageStore(config.pages.dir)
    app[validator_key] = TitleValidator()
    app[renderer_key] = TemplateRenderer(templates_dir)

    app.router.add_routes(create_pages_routes())

    logger.debug(f"Serving pages from {config.pages.dir} with templates from {templates_dir}")
    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port, print=None)
