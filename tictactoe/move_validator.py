"""
Move validator for TicTacToe.
Checks moves without raising, for callers that prefer result values.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .game_board import GameBoard


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves against a GameBoard.

    Rules:
    1. (row, col) must be on the board
    2. Can only place on empty cells

    Same checks as GameBoard.mark(), but reported instead of raised.
    The board is never modified.
    """

    def validate_move(
        self,
        board: GameBoard,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark.
            col: Column to place the mark.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not (0 <= row < board.size and 0 <= col < board.size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{board.size - 1}."
            )

        square = board.get_square(row, col)
        if not square.is_empty:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {square.value.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: GameBoard) -> List[Tuple[int, int]]:
        """
        Get all valid moves.

        Args:
            board: Current board.

        Returns:
            List of (row, col) positions, empty once the game has ended.
        """
        if board.check_winner() is not None:
            return []

        return board.get_empty_cells()
