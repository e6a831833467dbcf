"""The game loop: states, input, scoring and drawing."""

from __future__ import annotations

import argparse
import logging
import re
from enum import Enum, auto
from pathlib import Path

import pygame

from classicsnake.food import Food
from classicsnake.grid import Grid
from classicsnake.snake import Direction, Snake
from classicsnake.sound import SoundManager, SoundType
from classicsnake.text import TextRenderer

logger = logging.getLogger(__name__)

FPS = 60
CELL_SIZE = 20
POINTS_PER_FOOD = 10
WINDOW_TITLE = "Classic Snake"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
DEFAULT_HIGHSCORE_PATH = Path("highscore.dat")

BACKGROUND = (0, 0, 0)
BORDER_COLOR = (100, 100, 100)
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
OVERLAY = (0, 0, 0, 200)

_DIRECTION_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class GameState(Enum):
    """What the game is currently showing."""

    MENU = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class Game:
    """A window running one game of snake."""

    def __init__(
        self,
        title: str = WINDOW_TITLE,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        highscore_path: str | Path = DEFAULT_HIGHSCORE_PATH,
    ) -> None:
        self.width = width
        self.height = height
        self.cell_size = CELL_SIZE
        self.grid_width = width // CELL_SIZE
        self.grid_height = height // CELL_SIZE
        self._highscore_path = Path(highscore_path)
        self._closed = False

        pygame.init()
        pygame.display.set_caption(title)
        self._screen = pygame.display.set_mode((width, height))
        self._clock = pygame.time.Clock()

        self.snake = self._new_snake()
        self.food = Food(self.grid_width, self.grid_height)
        self.food.reposition(self.snake)

        self._text = TextRenderer()
        if not self._text.initialize():
            logger.error("failed to initialise text renderer")
        self._sound = SoundManager()
        if not self._sound.initialize():
            logger.error("failed to initialise sound manager")
        self._grid = Grid(self.grid_width, self.grid_height, self.cell_size)

        self.high_score = 0
        self.load_high_score()
        self.state = GameState.MENU
        self.score = 0
        self.delta_time = 0.0
        self.is_running = True

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def screen(self) -> pygame.Surface:
        """The surface the game draws onto."""
        return self._screen

    def _new_snake(self) -> Snake:
        return Snake(self.grid_width // 2, self.grid_height // 2, self.grid_width, self.grid_height)

    def run(self) -> None:
        """Process events, update and draw until the window is closed."""
        while self.is_running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.is_running = False
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)

            if self.state is GameState.PLAYING:
                self.update(self.delta_time)
            self.render()

            self.delta_time = self._clock.tick(FPS) / 1000.0

    def handle_key(self, key: int) -> None:
        """React to a pressed key."""
        if key in (pygame.K_ESCAPE, pygame.K_p):
            if self.state is GameState.PLAYING:
                self.state = GameState.PAUSED
            elif self.state is GameState.PAUSED:
                self.state = GameState.PLAYING
        elif key == pygame.K_RETURN:
            if self.state in (GameState.MENU, GameState.GAME_OVER):
                self.reset()
                self.state = GameState.PLAYING
        elif key in _DIRECTION_KEYS:
            if self.state is GameState.PLAYING:
                self.snake.change_direction(_DIRECTION_KEYS[key])
                self._sound.play_sound(SoundType.MOVE)

    def update(self, delta_time: float) -> None:
        """Advance the snake and food, then apply eating and collisions."""
        self.snake.update(delta_time)
        self.food.update(delta_time)

        if self.snake.eat_food(self.food.x, self.food.y):
            self.score += POINTS_PER_FOOD
            if self.score > self.high_score:
                self.high_score = self.score
                self.save_high_score()
            self.snake.grow()
            self.food.reposition(self.snake)
            self._sound.play_sound(SoundType.EAT)

        if self.snake.check_collision():
            self.state = GameState.GAME_OVER
            self._sound.play_sound(SoundType.GAME_OVER)

    def render(self) -> None:
        """Draw the current state and show it."""
        self._screen.fill(BACKGROUND)
        pygame.draw.rect(self._screen, BORDER_COLOR, pygame.Rect(0, 0, self.width, self.height), 1)

        if self.state is GameState.MENU:
            self._render_menu()
        else:
            self._render_gameplay()
            if self.state is GameState.PAUSED:
                self._render_paused()
            elif self.state is GameState.GAME_OVER:
                self._render_game_over()

        pygame.display.flip()

    def _render_gameplay(self) -> None:
        self._grid.render(self._screen)
        self.snake.render(self._screen, self.cell_size)
        self.food.render(self._screen, self.cell_size)
        self._text.render(self._screen, f"Score: {self.score}", 10, 10, WHITE)
        self._text.render(self._screen, f"High Score: {self.high_score}", self.width - 180, 10, WHITE)

    def _render_menu(self) -> None:
        half = self.height // 2
        self._text.render_centered(self._screen, "CLASSIC SNAKE", self.height // 4, GREEN, 48)
        self._text.render_centered(self._screen, "Press ENTER to Start", half, WHITE, 24)
        self._text.render_centered(
            self._screen, "Use Arrow Keys or WASD to control the snake", half + 50, WHITE, 24
        )
        self._text.render_centered(self._screen, "P or ESC to Pause", half + 100, WHITE, 24)

    def _render_overlay(self) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill(OVERLAY)
        self._screen.blit(overlay, (0, 0))

    def _render_paused(self) -> None:
        self._render_overlay()
        self._text.render_centered(self._screen, "PAUSED", self.height // 3, WHITE, 36)
        self._text.render_centered(self._screen, "Press P or ESC to Resume", self.height // 2, WHITE, 24)

    def _render_game_over(self) -> None:
        self._render_overlay()
        self._text.render_centered(self._screen, "GAME OVER", self.height // 3, RED, 36)
        self._text.render_centered(self._screen, f"Final Score: {self.score}", self.height // 2, WHITE, 24)
        self._text.render_centered(
            self._screen, "Press ENTER to Play Again", self.height // 2 + 50, WHITE, 24
        )

    def reset(self) -> None:
        """Start a fresh round with a new snake, new food and zero score."""
        self.snake = self._new_snake()
        self.food = Food(self.grid_width, self.grid_height)
        self.food.reposition(self.snake)
        self.score = 0

    def save_high_score(self) -> None:
        """Write the high score to its file; failures are logged and ignored."""
        try:
            self._highscore_path.write_text(str(self.high_score))
        except OSError as exc:
            logger.error("could not save high score to %s: %s", self._highscore_path, exc)

    def load_high_score(self) -> None:
        """Read the high score from its file, or start at zero without one."""
        try:
            content = self._highscore_path.read_text()
        except OSError:
            self.high_score = 0
            return
        match = _LEADING_INT.match(content)
        if match:
            self.high_score = int(match.group(1))

    def close(self) -> None:
        """Save the high score and release audio, fonts and the window."""
        if self._closed:
            return
        self._closed = True
        self.save_high_score()
        self._text.clean()
        self._sound.clean()
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="classicsnake", description="Play classic snake.")
    parser.parse_args(argv)
    with Game(WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT) as game:
        game.run()
    return 0