"""Battle_Othello package exports."""

from .Board import Board, InvalidCoordinate, BLACK, WHITE, EMPTY
from .Othellogame import Othellogame
from .Player import Player, HumanPlayer, GuiHumanPlayer, GameAborted

# Subpackages for rules, GUI, and helpers
from . import engine, gui, utils

__all__ = [
    "Board",
    "InvalidCoordinate",
    "BLACK",
    "WHITE",
    "EMPTY",
    "Othellogame",
    "Player",
    "HumanPlayer",
    "GuiHumanPlayer",
    "GameAborted",
    "engine",
    "gui",
    "utils",
]
