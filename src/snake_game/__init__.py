"""Snake game: deterministic grid simulation core."""

from snake_game.config import SessionConfig
from snake_game.controls import GestureClassifier, InputEvent, dispatch
from snake_game.difficulty import Difficulty, DifficultyProfile, profile_for
from snake_game.engine import GameResult, SnakeLogic
from snake_game.food import FoodSpawner, InitialPlacement
from snake_game.game import SnakeGame
from snake_game.grid import Grid
from snake_game.menu import Menu, MenuAction
from snake_game.render import DrawableOn, HandleArena
from snake_game.session import GameSession, Screen
from snake_game.snake import Direction, Snake, turn

__all__ = [
    "Difficulty",
    "DifficultyProfile",
    "Direction",
    "DrawableOn",
    "FoodSpawner",
    "GameResult",
    "GameSession",
    "GestureClassifier",
    "Grid",
    "HandleArena",
    "InitialPlacement",
    "InputEvent",
    "Menu",
    "MenuAction",
    "Screen",
    "SessionConfig",
    "Snake",
    "SnakeGame",
    "SnakeLogic",
    "dispatch",
    "profile_for",
    "turn",
]
