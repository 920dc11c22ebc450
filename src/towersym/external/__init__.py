from .nauty import (
    NAUTY_DREADNAUT,
    dreadnaut_available,
    aut_size_g6,
    aut_size,
)

__all__ = [
    "NAUTY_DREADNAUT",
    "dreadnaut_available",
    "aut_size_g6",
    "aut_size",
]
