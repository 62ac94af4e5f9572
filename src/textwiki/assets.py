"""Discovery of the templates bundled with the textwiki package."""

from importlib.resources import files
from pathlib import Path


def get_templates_dir() -> Path:
    """Return path to the bundled page templates.

    Returns:
        Path to the directory containing view.html and edit.html.

    Raises:
        FileNotFoundError: If the templates are not bundled.
    """
    templates = files("textwiki").joinpath("templates")
    if not templates.is_dir():
        msg = "Bundled templates not found. Reinstall the textwiki package."
        raise FileNotFoundError(msg)
    return Path(str(templates))
