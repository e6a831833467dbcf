"""The classic Snake arcade game: snake, food, grid, text, sound and the game loop."""

__version__ = "1.0.0"
__all__ = ["food", "game", "grid", "snake", "sound", "text"]