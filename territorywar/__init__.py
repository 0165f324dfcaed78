"""A console game of territories, armies, dice battles and missions."""

__version__ = "0.1.0"

__all__ = ["__version__"]