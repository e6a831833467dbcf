from pathlib import Path
from unittest import mock

import pygame

from classicsnake.sound import SoundManager, SoundType


@mock.patch("pygame.mixer.quit")
@mock.patch("pygame.mixer.Sound")
@mock.patch("pygame.mixer.init")
def test_initialize_loads_all_sounds(init, sound_cls, quit_):
    manager = SoundManager("sfx")
    assert manager.initialize() is True
    init.assert_called_once_with(frequency=44100, size=-16, channels=2, buffer=2048)
    loaded = {call.args[0] for call in sound_cls.call_args_list}
    assert loaded == {
        str(Path("sfx") / "eat.wav"),
        str(Path("sfx") / "game_over.wav"),
        str(Path("sfx") / "move.wav"),
    }


@mock.patch("pygame.mixer.quit")
@mock.patch("pygame.mixer.Sound")
@mock.patch("pygame.mixer.init")
def test_play_sound_plays_loaded_effect(init, sound_cls, quit_):
    manager = SoundManager("sfx")
    manager.initialize()
    assert manager.play_sound(SoundType.EAT) is True
    sound_cls.return_value.play.assert_called_once_with()


def test_play_before_initialize_is_silent():
    manager = SoundManager("sfx")
    assert manager.play_sound(SoundType.EAT) is False
    assert manager.initialized is False


@mock.patch("pygame.mixer.quit")
@mock.patch("pygame.mixer.init", side_effect=pygame.error("no audio"))
def test_initialize_fails_without_audio(init, quit_):
    manager = SoundManager("sfx")
    assert manager.initialize() is False
    assert manager.play_sound(SoundType.MOVE) is False


@mock.patch("pygame.mixer.quit")
@mock.patch("pygame.mixer.init")
def test_missing_file_leaves_only_that_effect_silent(init, quit_):
    def fake_sound(path):
        if path.endswith("move.wav"):
            raise FileNotFoundError(path)
        return mock.MagicMock()

    with mock.patch("pygame.mixer.Sound", side_effect=fake_sound):
        manager = SoundManager("sfx")
        assert manager.initialize() is True
    assert manager.play_sound(SoundType.MOVE) is False
    assert manager.play_sound(SoundType.EAT) is True


@mock.patch("pygame.mixer.quit")
@mock.patch("pygame.mixer.Sound")
@mock.patch("pygame.mixer.init")
def test_clean_closes_audio(init, sound_cls, quit_):
    manager = SoundManager("sfx")
    manager.initialize()
    manager.clean()
    quit_.assert_called_once_with()
    assert manager.initialized is False
    assert manager.play_sound(SoundType.EAT) is False