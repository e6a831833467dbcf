"""Background grid lines."""

from __future__ import annotations

import pygame

GRID_COLOR = (50, 50, 50)


class Grid:
    """Draws the lines separating the cells of the playing field."""

    def __init__(self, grid_width: int, grid_height: int, cell_size: int) -> None:
        self._grid_width = grid_width
        self._grid_height = grid_height
        self._cell_size = cell_size

    def render(self, surface: pygame.Surface) -> None:
        """Draw vertical and horizontal grid lines onto ``surface``."""
        width = self._grid_width * self._cell_size
        height = self._grid_height * self._cell_size
        for column in range(self._grid_width + 1):
            x = column * self._cell_size
            pygame.draw.line(surface, GRID_COLOR, (x, 0), (x, height))
        for row in range(self._grid_height + 1):
            y = row * self._cell_size
            pygame.draw.line(surface, GRID_COLOR, (0, y), (width, y))