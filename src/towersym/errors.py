"""Exception types for invalid caller input.

Every error here is a contract violation on the arguments of a single call.
They all derive from ``ValueError`` so callers can catch them broadly.
"""
from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Base class for invalid-argument failures."""


class VertexOutOfRangeError(InvalidArgumentError):
    """A vertex label lies outside ``[0, n)``."""


class LengthMismatchError(InvalidArgumentError):
    """Label list and permutation have different lengths."""


class PermutationIndexError(InvalidArgumentError):
    """A permutation entry lies outside ``[0, k)``."""


class StateValueError(InvalidArgumentError):
    """A vertex value does not fit in the bits reserved per vertex."""


class EncodingWidthError(InvalidArgumentError):
    """The packed state would need more than the available bits."""


class MappingSizeError(InvalidArgumentError):
    """A mapping was checked against a graph with a different vertex count."""
