"""HTML rendering of pages through Jinja2 templates.

All known templates are parsed when the renderer is constructed, so a missing
or malformed template stops the server at startup instead of failing the
first request that needs it.
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template, TemplateError, select_autoescape

from textwiki.core.errors import RenderError
from textwiki.core.types import Page

logger = logging.getLogger(__name__)

TEMPLATE_NAMES = ("view", "edit")


class TemplateRenderer:
    """Renders pages with the fixed ``view`` and ``edit`` templates.

    Each name maps to ``<name>.html`` in the templates directory. Templates
    receive ``title`` and ``body``; the body is HTML-escaped by autoescape.
    """

    def __init__(self, templates_dir: Path) -> None:
        """Initialize renderer and parse all templates.

        Args:
            templates_dir: Directory containing view.html and edit.html

        Raises:
            RenderError: If a template is missing or has a syntax error
        """
        self._templates_dir = templates_dir
        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(),
        )
        self._templates: dict[str, Template] = {}
        for name in TEMPLATE_NAMES:
            try:
                self._templates[name] = self._env.get_template(f"{name}.html")
            except TemplateError as e:
                raise RenderError(f"Failed to load template {name!r} from {templates_dir}: {e}") from e

    @property
    def templates_dir(self) -> Path:
        """Directory the templates were loaded from."""
        return self._templates_dir

    def render(self, name: str, page: Page) -> str:
        """Render a page with a named template.

        Args:
            name: Template name ("view" or "edit")
            page: Page to render

        Returns:
            Rendered HTML

        Raises:
            RenderError: If the name is unknown or rendering fails
        """
        template = self._templates.get(name)
        if template is None:
            raise RenderError(f"Unknown template: {name}")
        try:
            return template.render(title=page.title, body=page.text)
        except Exception as e:
            logger.error(f"Rendering {name!r} for page {page.title} failed: {e}")
            raise RenderError(f"Failed to render template {name!r}: {e}") from e
