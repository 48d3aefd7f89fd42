"""Error types raised by sgrcolor."""

from __future__ import annotations

__all__ = ["InvalidArgument"]


class InvalidArgument(ValueError):
    """A colour value fell outside the domain of its representation."""
