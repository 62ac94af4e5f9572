"""Shared test fixtures."""

from pathlib import Path

import pytest
from textwiki.config import Config, PagesConfig, ServerConfig, TemplatesConfig
from textwiki.core.store import PageStore


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """Create an empty pages directory."""
    pages = tmp_path / "pages"
    pages.mkdir(exist_ok=True)
    return pages


@pytest.fixture
def test_config(pages_dir: Path) -> Config:
    """Create a test configuration with bundled templates and tmp pages dir."""
    return Config(
        server=ServerConfig(),
        pages=PagesConfig(dir=pages_dir),
        templates=TemplatesConfig(),
    )


@pytest.fixture
def store(pages_dir: Path) -> PageStore:
    """Create a page store over the tmp pages dir."""
    return PageStore(pages_dir)
