"""
Board state for N x N TicTacToe.
Holds the grid, enforces move legality, and computes the outcome.
"""

from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple
from dataclasses import dataclass

import numpy as np

from .config import GameConfig
from .errors import IllegalMoveError, OutOfBoundsError


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class Outcome(Enum):
    """
    Terminal outcome of a game.

    A game still in progress has no outcome, so GameBoard.check_winner()
    returns None for it.
    """
    X = "X"
    O = "O"
    TIE = "tie"

    @classmethod
    def from_player(cls, player: Player) -> "Outcome":
        return cls(player.value)

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a tie."""
        if self == Outcome.TIE:
            return None
        return Player(self.value)


@dataclass(frozen=True)
class Square:
    """One cell of the board. value is None when the cell is empty."""
    value: Optional[Player] = None

    @property
    def is_empty(self) -> bool:
        return self.value is None


EMPTY = Square()


class GameBoard:
    """
    An N x N TicTacToe board.

    Cells are stored row-major, so (row, col) lives at index row * N + col.
    The board is mutated in place and only through mark(); use copy() when
    an independent snapshot is needed.

    The board does not track turns or trigger win checks on its own: the
    caller alternates players and calls check_winner() after each mark.
    """

    def __init__(self, size: int = GameConfig.BOARD_SIZE):
        """
        Create an empty board.

        Args:
            size: Board dimension N (must be >= 1).
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise TypeError(f"Board size must be an integer, got {size!r}")
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")

        self._size = int(size)
        self._cells: List[Square] = [EMPTY] * (self._size * self._size)

    # ==================== CONSTRUCTION HELPERS ====================

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> "GameBoard":
        """
        Build a board from N rows of "X", "O" and empty markers.

        No turn order is enforced, so this can produce positions that
        legal play never reaches.

        Args:
            rows: e.g. ["XOX", "XOO", "OXX"] or [["X", None, "O"], ...].

        Returns:
            A new GameBoard.
        """
        size = len(rows)
        if size == 0 or any(len(row) != size for row in rows):
            raise ValueError("Rows must form a non-empty square grid")

        board = cls(size)
        for row_index, row in enumerate(rows):
            for col_index, symbol in enumerate(row):
                if symbol is None or symbol in GameConfig.EMPTY_MARKERS:
                    continue
                board.mark(symbol, row_index, col_index)
        return board

    @classmethod
    def from_array(cls, array) -> "GameBoard":
        """
        Build a board from a square array of 1 (X), -1 (O) and 0 (empty).
        Inverse of to_array().
        """
        grid = np.asarray(array)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1] or grid.shape[0] == 0:
            raise ValueError(f"Expected a non-empty square array, got shape {grid.shape}")

        decode = {code: symbol for symbol, code in GameConfig.ARRAY_VALUES.items()}
        board = cls(grid.shape[0])
        for (row, col), code in np.ndenumerate(grid):
            if code == 0:
                continue
            if code not in decode:
                raise ValueError(f"Unexpected value {code} at ({row}, {col})")
            board.mark(decode[code], row, col)
        return board

    def copy(self) -> "GameBoard":
        """Create an independent copy of the board."""
        new_board = GameBoard(self._size)
        new_board._cells = list(self._cells)
        return new_board

    # ==================== QUERIES ====================

    @property
    def size(self) -> int:
        return self._size

    @property
    def cells(self) -> Tuple[Square, ...]:
        """All squares, row-major."""
        return tuple(self._cells)

    def is_full(self) -> bool:
        """True if every cell is occupied."""
        return all(not square.is_empty for square in self._cells)

    def get_square(self, row: int, col: int) -> Square:
        """Get the square at (row, col)."""
        return self._cells[self._index(row, col)]

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        return [
            divmod(index, self._size)
            for index, square in enumerate(self._cells)
            if square.is_empty
        ]

    # ==================== MOVES ====================

    def mark(self, player, row: int, col: int) -> None:
        """
        Place a player's mark at (row, col).

        Args:
            player: Player.X / Player.O, or "X" / "O".
            row: Row index in [0, N).
            col: Column index in [0, N).

        Raises:
            OutOfBoundsError: (row, col) is not on the board.
            IllegalMoveError: The cell is already occupied.
        """
        player = Player(player)
        index = self._index(row, col)

        current = self._cells[index]
        if not current.is_empty:
            raise IllegalMoveError(row, col, current.value)

        self._cells[index] = Square(player)

    # ==================== OUTCOME ====================

    def line_starts(self) -> Iterator[Tuple[int, int]]:
        """
        Yield (start, step) for every line, in the order check_winner()
        scans them: row i then column i for each i, then the main diagonal
        and the anti-diagonal.
        """
        n = self._size
        for i in range(n):
            yield i * n, 1
            yield i, n
        yield 0, n + 1
        yield n - 1, n - 1

    def check_line(self, start: int, step: int, count: int) -> bool:
        """
        Check whether a line holds the same non-empty mark throughout.

        Args:
            start: Flattened index of the first cell.
            step: Distance between consecutive cells.
            count: Number of cells in the line.
        """
        value = self._cells[start].value
        if value is None:
            return False

        for k in range(1, count):
            if self._cells[start + k * step].value != value:
                return False
        return True

    def check_winner(self) -> Optional[Outcome]:
        """
        Compute the outcome of the current position.

        If several lines are complete at once, the first one in
        line_starts() order decides.

        Returns:
            Outcome.X or Outcome.O for a win, Outcome.TIE for a full board
            without a complete line, None while the game is in progress.
        """
        for start, step in self.line_starts():
            if self.check_line(start, step, self._size):
                return Outcome.from_player(self._cells[start].value)

        return Outcome.TIE if self.is_full() else None

    # ==================== EXPORT ====================

    def to_array(self) -> np.ndarray:
        """Return the board as an (N, N) int8 array: X = 1, O = -1, empty = 0."""
        codes = [
            0 if square.is_empty else GameConfig.ARRAY_VALUES[square.value.value]
            for square in self._cells
        ]
        return np.array(codes, dtype=np.int8).reshape(self._size, self._size)

    def render(self) -> str:
        """Render the board as text with row and column headers."""
        width = len(str(self._size - 1))
        header = " " * (width + 1) + " ".join(
            str(col).rjust(width) for col in range(self._size)
        )
        lines = [header]
        for row in range(self._size):
            symbols = []
            for col in range(self._size):
                square = self.get_square(row, col)
                symbol = GameConfig.EMPTY_SYMBOL if square.is_empty else square.value.value
                symbols.append(symbol.rjust(width))
            lines.append(str(row).rjust(width) + " " + " ".join(symbols))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        marks = "".join(
            GameConfig.EMPTY_SYMBOL if square.is_empty else square.value.value
            for square in self._cells
        )
        return f"GameBoard(size={self._size}, cells={marks!r})"

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise OutOfBoundsError(row, col, self._size)
        return row * self._size + col
