"""
Core package for the Codium lesson viewer.

The package is importable without any front-end installed; the console
front-end and CLI live in their own subpackages.
"""

from importlib import metadata


def get_version() -> str:
    """Return the installed project version."""
    try:
        return metadata.version("codium")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["get_version"]
