"""Exception hierarchy for Textwiki.

Every failure is raised by the core components and mapped to an HTTP
response at the handler boundary.
"""


class TextwikiError(Exception):
    """Base class for all Textwiki errors."""


class InvalidTitleError(TextwikiError):
    """Request path does not carry a valid page title."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid page title in path: {path!r}")
        self.path = path


class PageNotFoundError(TextwikiError):
    """Page file could not be read."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Page not found: {title}")
        self.title = title


class PageStorageError(TextwikiError):
    """Page file could not be written."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title


class RenderError(TextwikiError):
    """Template is missing or failed to render."""
