"""Errors raised before a search is allowed to start."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every puzzle input error."""


class InvalidShape(PuzzleError, ValueError):
    """The input is not a 3×3 grid."""


class MalformedState(PuzzleError, ValueError):
    """The grid is 3×3 but its values are not a permutation of 0-8."""
