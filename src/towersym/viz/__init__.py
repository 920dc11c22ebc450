from .layouts import grid_layout, base_layout
from .draw import draw_state, draw_path

__all__ = [
    "grid_layout",
    "base_layout",
    "draw_state",
    "draw_path",
]
