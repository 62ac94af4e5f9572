"""Core type definitions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """A titled page with raw body bytes."""

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded as UTF-8 for display."""
        return self.body.decode("utf-8", errors="replace")
