"""
Errors raised by GameBoard when a move cannot be applied.
All of them are recoverable: the board is left untouched.
"""


class MoveError(Exception):
    """Base class for rejected moves."""

    def __init__(self, message: str, row: int, col: int):
        super().__init__(message)
        self.row = row
        self.col = col


class IllegalMoveError(MoveError):
    """The target square is already occupied."""

    def __init__(self, row: int, col: int, occupant):
        super().__init__(
            f"Cell ({row}, {col}) is already occupied by {occupant.value}",
            row,
            col,
        )
        self.occupant = occupant


class OutOfBoundsError(MoveError, IndexError):
    """The (row, col) pair lies outside the board."""

    def __init__(self, row: int, col: int, size: int):
        super().__init__(
            f"Invalid position ({row}, {col}). Must be 0-{size - 1}.",
            row,
            col,
        )
        self.size = size
