import pygame
import pytest

from classicsnake.game import Game, GameState
from classicsnake.snake import Direction


@pytest.fixture
def headless(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def game(headless):
    g = Game("Test", 200, 200, headless / "hs.dat")
    yield g
    g.close()


def _start(game):
    game.handle_key(pygame.K_RETURN)
    assert game.state is GameState.PLAYING


def test_initial_state(game):
    assert game.state is GameState.MENU
    assert game.score == 0
    assert game.high_score == 0
    assert game.grid_width == 200 // 20


def test_enter_starts_playing(game):
    _start(game)


def test_pause_toggles_with_escape_and_p(game):
    _start(game)
    game.handle_key(pygame.K_ESCAPE)
    assert game.state is GameState.PAUSED
    game.handle_key(pygame.K_ESCAPE)
    assert game.state is GameState.PLAYING
    game.handle_key(pygame.K_p)
    assert game.state is GameState.PAUSED
    game.handle_key(pygame.K_p)
    assert game.state is GameState.PLAYING


def test_escape_in_menu_does_nothing(game):
    game.handle_key(pygame.K_ESCAPE)
    assert game.state is GameState.MENU


def test_direction_key_moves_snake_up(game):
    _start(game)
    game.food.x, game.food.y = 0, game.grid_height - 1
    hx, hy = game.snake.head
    game.handle_key(pygame.K_w)
    game.update(0.1)
    assert game.snake.head == (hx, hy - 1)


def test_direction_keys_ignored_outside_play(game):
    hx, hy = game.snake.head
    game.handle_key(pygame.K_UP)
    _start(game)
    game.food.x, game.food.y = 0, game.grid_height - 1
    game.update(0.1)
    assert game.snake.head == (hx + Direction.RIGHT.dx, hy)


def test_eating_food_scores_and_grows(game, headless):
    _start(game)
    hx, hy = game.snake.head
    game.food.x, game.food.y = hx + 1, hy
    length = len(game.snake)
    game.update(0.1)
    assert game.score == 10
    assert game.high_score == game.score
    assert (headless / "hs.dat").read_text() == str(game.score)
    assert (game.food.x, game.food.y) not in {(s.x, s.y) for s in game.snake.body}
    game.update(0.1)
    assert len(game.snake) == length + 1


def test_hitting_wall_ends_game_and_enter_restarts(game):
    _start(game)
    for _ in range(30):
        game.update(0.1)
        if game.state is GameState.GAME_OVER:
            break
    assert game.state is GameState.GAME_OVER
    assert game.snake.check_collision()
    game.handle_key(pygame.K_RETURN)
    assert game.state is GameState.PLAYING
    assert game.score == 0
    assert game.snake.head == (game.grid_width // 2, game.grid_height // 2)


def test_load_high_score_from_file(headless):
    (headless / "hs.dat").write_text("42")
    g = Game("Test", 200, 200, headless / "hs.dat")
    try:
        assert g.high_score == 42
    finally:
        g.close()


def test_load_high_score_garbage_keeps_zero(headless):
    (headless / "hs.dat").write_text("not a number")
    g = Game("Test", 200, 200, headless / "hs.dat")
    try:
        assert g.high_score == 0
    finally:
        g.close()


def test_save_and_load_round_trip(game):
    game.high_score = 1234
    game.save_high_score()
    game.high_score = 0
    game.load_high_score()
    assert game.high_score == 1234


def test_close_saves_high_score(headless):
    g = Game("Test", 200, 200, headless / "hs.dat")
    g.high_score = 77
    g.close()
    assert (headless / "hs.dat").read_text() == "77"


def test_render_draws_border_and_food(game):
    game.render()
    assert game.screen.get_at((0, 0))[:3] == (100, 100, 100)
    _start(game)
    game.food.x, game.food.y = 1, game.grid_height - 2
    game.render()
    cx = game.food.x * game.cell_size + game.cell_size // 2
    cy = game.food.y * game.cell_size + game.cell_size // 2
    playing = game.screen.get_at((cx, cy))
    assert playing[:3] == (255, 0, 0)
    game.handle_key(pygame.K_p)
    game.render()
    paused = game.screen.get_at((cx, cy))
    assert paused[0] < playing[0]


def test_run_processes_events_until_quit(game):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()
    assert game.is_running is False
    assert game.state is GameState.PLAYING