"""Tests for template rendering."""

from pathlib import Path

import pytest
from textwiki.assets import get_templates_dir
from textwiki.core.errors import RenderError
from textwiki.core.templates import TemplateRenderer
from textwiki.core.types import Page


def _write_templates(directory: Path, view: str, edit: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "view.html").write_text(view, encoding="utf-8")
    (directory / "edit.html").write_text(edit, encoding="utf-8")
    return directory


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer(get_templates_dir())


class TestRender:
    """Tests for TemplateRenderer.render() with bundled templates."""

    def test__view__includes_title_and_body(self, renderer: TemplateRenderer) -> None:
        """Substitute title and body into the view template."""
        html = renderer.render("view", Page(title="Foo", body=b"Hello, world"))

        assert "<h1>Foo</h1>" in html
        assert "Hello, world" in html
        assert 'href="/edit/Foo"' in html

    def test__edit__renders_form(self, renderer: TemplateRenderer) -> None:
        """Edit template posts to the save endpoint."""
        html = renderer.render("edit", Page(title="Foo", body=b"draft"))

        assert 'action="/save/Foo"' in html
        assert ">draft</textarea>" in html

    def test__body__is_html_escaped(self, renderer: TemplateRenderer) -> None:
        """Body is rendered as text, not markup."""
        html = renderer.render("view", Page(title="Foo", body=b"<script>alert(1)</script>"))

        assert "<script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

    def test__unknown_name__raises_render_error(self, renderer: TemplateRenderer) -> None:
        """Only view and edit are known templates."""
        with pytest.raises(RenderError, match="Unknown template: delete"):
            renderer.render("delete", Page(title="Foo"))


class TestCustomTemplates:
    """Tests for TemplateRenderer with a custom templates directory."""

    def test__custom_dir__is_used(self, tmp_path: Path) -> None:
        """Render templates from the given directory."""
        templates = _write_templates(
            tmp_path / "templates", "VIEW {{ title }}: {{ body }}", "EDIT {{ title }}"
        )
        renderer = TemplateRenderer(templates)

        assert renderer.templates_dir == templates
        assert renderer.render("view", Page(title="Foo", body=b"bar")) == "VIEW Foo: bar"
        assert renderer.render("edit", Page(title="Foo")) == "EDIT Foo"

    def test__missing_template__fails_at_construction(self, tmp_path: Path) -> None:
        """Fail fast when a template file is absent."""
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "view.html").write_text("{{ title }}", encoding="utf-8")

        with pytest.raises(RenderError, match="'edit'"):
            TemplateRenderer(templates)

    def test__syntax_error__fails_at_construction(self, tmp_path: Path) -> None:
        """Fail fast on a malformed template."""
        templates = _write_templates(tmp_path / "templates", "{% if %}", "{{ title }}")

        with pytest.raises(RenderError, match="'view'"):
            TemplateRenderer(templates)

    def test__execution_error__raises_render_error(self, tmp_path: Path) -> None:
        """Errors while rendering surface as RenderError."""
        templates = _write_templates(
            tmp_path / "templates", "{{ title.missing.attr }}", "{{ title }}"
        )
        renderer = TemplateRenderer(templates)

        with pytest.raises(RenderError, match="Failed to render template 'view'"):
            renderer.render("view", Page(title="Foo"))

    def test__python_exception__raises_render_error(self, tmp_path: Path) -> None:
        """Plain exceptions raised by template code also surface as RenderError."""
        templates = _write_templates(
            tmp_path / "templates", "{{ (1 // (title|length - 3)) }}", "{{ title }}"
        )
        renderer = TemplateRenderer(templates)

        with pytest.raises(RenderError, match="Failed to render template .view.") as exc_info:
            renderer.render("view", Page(title="Foo"))

        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)
