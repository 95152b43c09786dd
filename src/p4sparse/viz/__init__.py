from .draw import base_layout, draw_violation

__all__ = [
    "base_layout",
    "draw_violation",
]
