"""On-screen text drawing."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

logger = logging.getLogger(__name__)

DEFAULT_FONT_PATH = Path("assets") / "fonts" / "ARCADE_I.TTF"
DEFAULT_FONT_SIZE = 24


class TextRenderer:
    """Draws text in three preloaded sizes, falling back to the default font."""

    def __init__(self, font_path: str | Path | None = DEFAULT_FONT_PATH) -> None:
        self._font_path = str(font_path) if font_path is not None else None
        self._fonts: dict[int, pygame.font.Font | None] = {24: None, 36: None, 48: None}

    def initialize(self) -> bool:
        """Start the font system and load fonts; True if the small font loaded."""
        try:
            pygame.font.init()
        except pygame.error as exc:
            logger.error("font system could not be initialised: %s", exc)
            return False
        for size in self._fonts:
            self._fonts[size] = self._load_font(size)
        return self._fonts[24] is not None

    def _load_font(self, font_size: int) -> pygame.font.Font | None:
        if not pygame.font.get_init():
            pygame.font.init()
        if self._font_path is not None:
            try:
                return pygame.font.Font(self._font_path, font_size)
            except (OSError, pygame.error) as exc:
                logger.warning("failed to load font %s (%s); using default font", self._font_path, exc)
        try:
            font = pygame.font.Font(None, font_size)
        except (OSError, pygame.error) as exc:
            logger.error("failed to load default font: %s", exc)
            return None
        self._font_path = None
        return font

    def _select_font(self, font_size: int) -> pygame.font.Font | None:
        if font_size <= 24:
            font = self._fonts[24]
        elif font_size <= 36:
            font = self._fonts[36]
        else:
            font = self._fonts[48]
        return font if font is not None else self._load_font(font_size)

    def render(
        self,
        surface: pygame.Surface,
        text: str,
        x: int,
        y: int,
        color,
        font_size: int = DEFAULT_FONT_SIZE,
    ) -> pygame.Rect | None:
        """Draw ``text`` with its top-left at (x, y); returns the area drawn."""
        if not text:
            return None
        font = self._select_font(font_size)
        if font is None:
            return None
        rendered = font.render(text, True, color)
        return surface.blit(rendered, (x, y))

    def render_centered(
        self,
        surface: pygame.Surface,
        text: str,
        y: int,
        color,
        font_size: int = DEFAULT_FONT_SIZE,
    ) -> pygame.Rect | None:
        """Draw ``text`` centred horizontally on ``surface`` at height ``y``."""
        if not text:
            return None
        font = self._select_font(font_size)
        if font is None:
            return None
        text_width, _ = font.size(text)
        x = int((surface.get_width() - text_width) / 2)
        return self.render(surface, text, x, y, color, font_size)

    def clean(self) -> None:
        """Release the fonts and shut the font system down."""
        for size in self._fonts:
            self._fonts[size] = None
        pygame.font.quit()