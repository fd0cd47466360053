"""
TicTacToe rules engine
======================
Board state, move legality, and win/tie detection for N x N TicTacToe.
Presentation (rendering, input, turn alternation) lives outside this
package and calls into it.
"""

from .config import GameConfig
from .errors import MoveError, IllegalMoveError, OutOfBoundsError
from .game_board import GameBoard, Player, Outcome, Square
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker

__version__ = "1.0.0"
