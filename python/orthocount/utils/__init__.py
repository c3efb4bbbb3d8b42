from .points import generate_points, write_text_points, write_binary_points

__all__ = [
    "generate_points", "write_text_points", "write_binary_points"
]
