"""Terminal front-end built on Rich."""

from .widgets import ConsoleScreen

__all__ = ["ConsoleScreen"]
