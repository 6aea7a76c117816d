"""Exception types raised while building, rendering and sizing pages."""

from __future__ import annotations


class PagegenError(Exception):
    """Base class for all pagegen errors."""


class BuildError(PagegenError, TypeError):
    """A malformed modifier or attribute was passed while building a tree."""


class RenderError(PagegenError):
    """The output sink failed and rendering was aborted."""


class RenderCancelled(RenderError):
    """The output sink was cancelled mid-render."""


class CompressionError(PagegenError):
    """The compression stream could not be finalized."""


class AssetReadError(PagegenError, OSError):
    """A static asset could not be read."""


__all__ = [
    "AssetReadError",
    "BuildError",
    "CompressionError",
    "PagegenError",
    "RenderCancelled",
    "RenderError",
]
