"""The food pellet the snake chases."""

from __future__ import annotations

import math
import random

import pygame

from classicsnake.snake import Snake

FOOD_COLOR = (255, 0, 0)
PULSE_SPEED = 4.0
PULSE_AMPLITUDE = 0.2


class Food:
    """A pulsing pellet placed on a free grid cell."""

    def __init__(self, grid_width: int, grid_height: int, rng: random.Random | None = None) -> None:
        self.x = 0
        self.y = 0
        self.pulse_factor = 1.0
        self._grid_width = grid_width
        self._grid_height = grid_height
        self._animation_time = 0.0
        self._rng = rng if rng is not None else random.Random()

    def reposition(self, snake: Snake) -> None:
        """Move to a random cell not occupied by ``snake``.

        Raises RuntimeError when the snake covers the whole grid.
        """
        occupied = {
            (segment.x, segment.y)
            for segment in snake.body
            if 0 <= segment.x < self._grid_width and 0 <= segment.y < self._grid_height
        }
        if len(occupied) >= self._grid_width * self._grid_height:
            raise RuntimeError("no free cell left for food")

        while True:
            x = self._rng.randrange(self._grid_width)
            y = self._rng.randrange(self._grid_height)
            if (x, y) not in occupied:
                self.x, self.y = x, y
                return

    def update(self, delta_time: float) -> None:
        """Advance the pulsing animation."""
        self._animation_time += delta_time * PULSE_SPEED
        self.pulse_factor = 1.0 + PULSE_AMPLITUDE * math.sin(self._animation_time)

    def render(self, surface: pygame.Surface, cell_size: int) -> None:
        """Draw the pellet scaled by the current pulse."""
        pulse_size = int(cell_size * self.pulse_factor)
        offset = int((cell_size - pulse_size) / 2)
        surface.fill(
            FOOD_COLOR,
            pygame.Rect(
                self.x * cell_size + offset,
                self.y * cell_size + offset,
                pulse_size,
                pulse_size,
            ),
        )