"""The snake: its body, movement, growth and collision rules."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

import pygame

HEAD_COLOR = (0, 255, 0)
BODY_COLOR = (0, 200, 0)
EYE_COLOR = (0, 0, 0)

INITIAL_MOVE_DELAY = 0.1
MIN_MOVE_DELAY = 0.05
SPEEDUP_PER_SEGMENT = 0.002
SPEEDUP_START_LENGTH = 5
ANIMATION_SPEED = 10.0


class Direction(Enum):
    """A heading on the grid, valued by its (dx, dy) step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))


@dataclass
class Segment:
    """One cell of the snake, with a smoothed position for drawing."""

    x: int
    y: int
    visual_x: float
    visual_y: float

    @classmethod
    def at(cls, x: int, y: int) -> Segment:
        return cls(x, y, float(x), float(y))


class Snake:
    """A snake moving on a grid of ``grid_width`` by ``grid_height`` cells."""

    def __init__(self, start_x: int, start_y: int, grid_width: int, grid_height: int) -> None:
        self._body = [Segment.at(start_x - offset, start_y) for offset in range(3)]
        self._direction = Direction.RIGHT
        self._last_direction = Direction.RIGHT
        self._grid_width = grid_width
        self._grid_height = grid_height
        self._move_time = 0.0
        self._move_delay = INITIAL_MOVE_DELAY
        self._growing = False

    def __len__(self) -> int:
        return len(self._body)

    @property
    def head(self) -> tuple[int, int]:
        """Grid position of the head."""
        first = self._body[0]
        return first.x, first.y

    @property
    def body(self) -> tuple[Segment, ...]:
        """All segments, head first."""
        return tuple(self._body)

    def update(self, delta_time: float) -> None:
        """Advance animation and, once the move delay has elapsed, move one cell."""
        self._move_time += delta_time

        step = delta_time * ANIMATION_SPEED
        for segment in self._body:
            segment.visual_x += (segment.x - segment.visual_x) * step
            segment.visual_y += (segment.y - segment.visual_y) * step

        if self._move_time < self._move_delay:
            return

        self._move_time = 0.0
        self._last_direction = self._direction

        if self._growing:
            self._body.insert(1, replace(self._body[0]))
            self._growing = False
        else:
            leading = [(segment.x, segment.y) for segment in self._body[:-1]]
            for segment, (x, y) in zip(self._body[1:], leading):
                segment.x, segment.y = x, y

        head = self._body[0]
        head.x += self._direction.dx
        head.y += self._direction.dy

        length = len(self._body)
        if length > SPEEDUP_START_LENGTH and self._move_delay > MIN_MOVE_DELAY:
            delay = INITIAL_MOVE_DELAY - (length - SPEEDUP_START_LENGTH) * SPEEDUP_PER_SEGMENT
            self._move_delay = max(delay, MIN_MOVE_DELAY)

    def render(self, surface: pygame.Surface, cell_size: int) -> None:
        """Draw the snake, its head and eyes onto ``surface``."""
        for segment in reversed(self._body[1:]):
            surface.fill(
                BODY_COLOR,
                pygame.Rect(
                    int(segment.visual_x * cell_size),
                    int(segment.visual_y * cell_size),
                    cell_size,
                    cell_size,
                ),
            )

        head = self._body[0]
        head_x = int(head.visual_x * cell_size)
        head_y = int(head.visual_y * cell_size)
        surface.fill(HEAD_COLOR, pygame.Rect(head_x, head_y, cell_size, cell_size))

        eye_size = cell_size // 4
        near = cell_size // 4
        far = cell_size - near - eye_size
        eye_offsets = {
            Direction.UP: ((near, near), (far, near)),
            Direction.DOWN: ((near, far), (far, far)),
            Direction.LEFT: ((near, near), (near, far)),
            Direction.RIGHT: ((far, near), (far, far)),
        }[self._direction]
        for ex, ey in eye_offsets:
            surface.fill(EYE_COLOR, pygame.Rect(head_x + ex, head_y + ey, eye_size, eye_size))

        for segment in self._body[1:]:
            surface.fill(
                BODY_COLOR,
                pygame.Rect(
                    segment.x * cell_size + 1,
                    segment.y * cell_size + 1,
                    cell_size - 2,
                    cell_size - 2,
                ),
            )

    def change_direction(self, new_direction: Direction) -> None:
        """Turn, unless the turn would reverse the last move."""
        if new_direction is not self._last_direction.opposite:
            self._direction = new_direction

    def grow(self) -> None:
        """Grow by one segment on the next move."""
        self._growing = True

    def check_collision(self) -> bool:
        """True if the head is off the grid or on the snake's own body."""
        head_x, head_y = self.head
        if not (0 <= head_x < self._grid_width and 0 <= head_y < self._grid_height):
            return True
        return any(segment.x == head_x and segment.y == head_y for segment in self._body[1:])

    def eat_food(self, food_x: int, food_y: int) -> bool:
        """True if the head is on the given cell."""
        return self.head == (food_x, food_y)