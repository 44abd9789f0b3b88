"""Shell history helpers: duration formatting, cursor editing, entry formatting, list scrolling, fuzzy ranking and statistics."""

__version__ = "0.1.0"