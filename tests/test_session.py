"""Tests for GameSession input routing."""

import threading

from snake_game.config import SessionConfig
from snake_game.difficulty import Difficulty
from snake_game.engine import GameResult, SnakeLogic
from snake_game.food import InitialPlacement
from snake_game.menu import MainOption, MenuType
from snake_game.session import GameSession, Screen
from snake_game.snake import Direction


def _session(**kwargs) -> GameSession:
    kwargs.setdefault("seed", 0)
    return GameSession(SessionConfig(**kwargs), now=0.0)


def _in_game(**kwargs) -> GameSession:
    session = _session(**kwargs)
    session.enter_or_space_pressed(now=0.0)
    return session


class TestSessionMenu:
    def test_starts_in_menu(self):
        session = _session()
        assert session.screen is Screen.MENU
        assert session.menu.difficulty is Difficulty.NORMAL

    def test_up_down_navigate(self):
        session = _session()
        session.up_pressed()
        assert session.menu.main_option is MainOption.SETTINGS
        session.down_pressed()
        assert session.menu.main_option is MainOption.NEW_GAME

    def test_left_right_ignored_on_main_menu(self):
        session = _session()
        session.right_pressed()
        session.left_pressed()
        assert session.menu.main_option is MainOption.NEW_GAME
        assert session.menu.difficulty is Difficulty.NORMAL

    def test_left_right_change_difficulty_in_settings(self):
        session = _session()
        session.down_pressed()
        session.enter_or_space_pressed()
        assert session.menu.menu_type is MenuType.SETTINGS
        session.right_pressed()
        assert session.menu.difficulty is Difficulty.INTERMEDIATE
        session.left_pressed()
        session.left_pressed()
        assert session.menu.difficulty is Difficulty.EASY

    def test_new_game_uses_selected_difficulty(self):
        session = _session(difficulty=Difficulty.VERY_EASY)
        session.enter_or_space_pressed(now=0.0)
        assert session.screen is Screen.GAME
        assert (session.game.width, session.game.height) == (8, 8)

    def test_update_ignored_in_menu(self):
        session = _session(initial_placement=InitialPlacement.CORNER)
        session.game.change_direction(Direction.RIGHT)
        session.update(10.0)
        assert session.game.snake == ((0, 0),)


class TestSessionGame:
    def test_arrows_change_direction(self):
        for press, direction in [
            ("up_pressed", Direction.UP),
            ("down_pressed", Direction.DOWN),
            ("left_pressed", Direction.LEFT),
            ("right_pressed", Direction.RIGHT),
        ]:
            session = _in_game()
            getattr(session, press)()
            assert session.game.direction is direction

    def test_space_toggles_pause(self):
        session = _in_game()
        session.enter_or_space_pressed()
        assert session.game.is_paused()
        session.enter_or_space_pressed()
        assert not session.game.is_paused()

    def test_update_steps_game(self):
        session = _in_game(initial_placement=InitialPlacement.CORNER)
        session.right_pressed()
        session.update(0.5)
        assert session.game.snake[-1] == (1, 0)

    def test_space_after_game_over_returns_to_menu(self):
        session = _in_game()
        session.game.logic = SnakeLogic.from_state(
            25, 25, [(0, 0)], food=(5, 5), direction=Direction.UP,
        )
        session.update(1.0)
        assert session.game.last_result is GameResult.GAME_OVER

        old_game = session.game
        session.enter_or_space_pressed(now=2.0)
        assert session.screen is Screen.MENU
        assert session.game is not old_game
        assert not session.game.is_over()
        assert session.game.last_tick_time == 2.0


class TestSessionDraw:
    def test_draws_menu(self, surface):
        _session().draw(surface)
        assert surface.text_lines() == ["New Game", "Settings"]
        assert surface.rectangles == []

    def test_draws_game(self, surface):
        session = _in_game()
        session.draw(surface)
        # One snake cell plus the food.
        assert len(surface.rectangles) == 2
        assert "Your score: 1" in surface.text_lines()


class TestSessionLocking:
    def test_concurrent_input_and_updates(self):
        session = _in_game(difficulty=Difficulty.VERY_EASY)
        presses = [
            session.up_pressed, session.left_pressed,
            session.down_pressed, session.right_pressed,
        ]

        def press_keys():
            for i in range(200):
                presses[i % 4]()

        def tick():
            for i in range(200):
                session.update(i * 1.0)

        threads = [threading.Thread(target=press_keys), threading.Thread(target=tick)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        snake = session.game.snake
        assert len(set(snake)) == len(snake)
        assert session.game.food not in snake


class TestSessionClock:
    def test_new_game_starts_from_last_update(self):
        session = _session(initial_placement=InitialPlacement.CORNER)
        session.update(100.0)
        session.enter_or_space_pressed()
        assert session.game.last_tick_time == 100.0
        session.right_pressed()
        session.update(100.05)
        assert session.game.snake == ((0, 0),)
        session.update(100.2)
        assert session.game.snake == ((1, 0),)

    def test_restart_keeps_caller_clock(self):
        session = _in_game()
        session.game.logic = SnakeLogic.from_state(
            25, 25, [(0, 0)], food=(5, 5), direction=Direction.UP,
        )
        session.update(7.0)
        assert session.game.is_over()
        session.enter_or_space_pressed()
        assert session.game.last_tick_time == 7.0

    def test_session_without_start_time_seeds_on_first_update(self):
        session = GameSession(
            SessionConfig(seed=0, initial_placement=InitialPlacement.CORNER),
        )
        session.enter_or_space_pressed()
        session.right_pressed()
        session.update(3.0)
        assert session.game.snake == ((0, 0),)
        assert session.game.last_tick_time == 3.0
        session.update(3.5)
        assert session.game.snake == ((1, 0),)
