"""Sound effects."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import pygame

logger = logging.getLogger(__name__)

DEFAULT_SOUND_DIR = Path("assets") / "sounds"


class SoundType(Enum):
    """A sound effect, valued by its file name."""

    EAT = "eat.wav"
    GAME_OVER = "game_over.wav"
    MOVE = "move.wav"


class SoundManager:
    """Loads and plays the game's sound effects; silent when audio is missing."""

    def __init__(self, sound_dir: str | Path = DEFAULT_SOUND_DIR) -> None:
        self._sound_dir = Path(sound_dir)
        self._sounds: dict[SoundType, pygame.mixer.Sound] = {}
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> bool:
        """Open the audio device and load the effects.

        Returns False if audio could not be opened; missing files only
        leave their effect silent.
        """
        try:
            pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=2048)
        except pygame.error as exc:
            logger.error("audio could not be initialised: %s", exc)
            return False

        missing = [sound_type for sound_type in SoundType if not self._load_sound(sound_type)]
        if missing:
            logger.warning("could not load all sound files; continuing without them")

        self._initialized = True
        return True

    def _load_sound(self, sound_type: SoundType) -> bool:
        self._sounds.pop(sound_type, None)
        path = self._sound_dir / sound_type.value
        try:
            self._sounds[sound_type] = pygame.mixer.Sound(str(path))
        except (pygame.error, OSError) as exc:
            logger.error("failed to load sound effect %s: %s", path, exc)
            return False
        return True

    def play_sound(self, sound_type: SoundType) -> bool:
        """Play an effect; returns whether anything was played."""
        if not self._initialized:
            return False
        sound = self._sounds.get(sound_type)
        if sound is None:
            return False
        sound.play()
        return True

    def clean(self) -> None:
        """Release the effects and close the audio device."""
        self._sounds.clear()
        pygame.mixer.quit()
        self._initialized = False