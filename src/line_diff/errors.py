"""Exceptions raised by line-diff.

``InvalidArgumentError`` is the only error the engine raises itself.  It
subclasses ``ValueError`` so callers that already guard configuration with
``except ValueError`` keep working.
"""

from __future__ import annotations

__all__ = ["InvalidArgumentError"]


class InvalidArgumentError(ValueError):
    """A configuration value is outside its permitted range."""
