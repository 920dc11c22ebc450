from .encoding import MAX_BITS, StateEncoder
from .canonical import Canonicalizer

__all__ = [
    "MAX_BITS",
    "StateEncoder",
    "Canonicalizer",
]
