"""A falling-block puzzle game: board rules, pieces and a pygame front end."""

__version__ = "1.0.0"
__all__ = ["position", "colors", "block", "grid", "game", "app"]