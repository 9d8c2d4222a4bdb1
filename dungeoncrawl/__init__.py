"""A turn-based terminal dungeon crawler."""

__version__ = "1.0.0"
__all__ = ["__version__"]