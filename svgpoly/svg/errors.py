"""Structural path-data failures.

Raising one of these aborts the current path only; ``load_path`` turns it into
a ``None`` result and the document walk moves on.
"""

from __future__ import annotations


class PathDataError(ValueError):
    """Base class for path data that cannot be turned into a path record."""


class EmptyPathError(PathDataError):
    """The path data produced no commands."""


class SubpathStructureError(PathDataError):
    """The command list does not start with a move command."""


class MalformedCommandError(PathDataError):
    """A command's arguments do not fit its fixed arity, or a number is unreadable."""
