"""
Win checker for TicTacToe.
Reports which line won, on top of GameBoard.check_winner().
"""

from typing import Optional, List, Tuple

from .game_board import GameBoard, Outcome


class WinChecker:
    """
    Finds the winning line of a board.

    Lines are scanned in the same order as GameBoard.check_winner(), so the
    line returned here always belongs to the reported winner.
    """

    def get_winning_line(self, board: GameBoard) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            board: The board.

        Returns:
            The winning line as list of (row, col), or None.
        """
        n = board.size
        for start, step in board.line_starts():
            if board.check_line(start, step, n):
                return [divmod(start + k * step, n) for k in range(n)]
        return None

    def check_draw(self, board: GameBoard) -> bool:
        """True if the board is full and no line is complete."""
        return board.check_winner() is Outcome.TIE
