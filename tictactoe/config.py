"""
Game configuration for the TicTacToe rules engine.
Defaults for board size, symbols, and console messages.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The console driver can override BOARD_SIZE and FIRST_PLAYER from the
    command line.
    """

    # ==================== BOARD SETTINGS ====================
    # Classic TicTacToe is 3x3, any N >= 1 works
    BOARD_SIZE = 3

    # Player that moves first ("X" or "O")
    FIRST_PLAYER = "X"

    # ==================== RENDERING ====================
    # Symbol drawn for an empty cell
    EMPTY_SYMBOL = "."

    # Symbols accepted as "empty" when building a board from text rows
    EMPTY_MARKERS = ("", " ", ".", "-")

    # Numeric encoding used by GameBoard.to_array() / from_array()
    ARRAY_VALUES = {"X": 1, "O": -1}

    # ==================== CONSOLE MESSAGES ====================
    MOVE_PROMPT = "Player {player}, enter your move as 'row col': "
    INVALID_MOVE_MESSAGE = "Invalid move! Try again."
    TIE_MESSAGE = "It's a tie!"
    WIN_MESSAGE = "Player {player} wins!"
