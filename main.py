"""
Console front end for TicTacToe.

This script is the presentation layer around the rules engine:
- Draws the board after every accepted move
- Turns typed "row col" input into moves
- Alternates players and stops once the game is decided

Run this script to play TicTacToe in the terminal!
"""

from typing import Callable, Optional, Tuple

from tictactoe import GameBoard, GameConfig, MoveError, Outcome, Player


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse a move typed as "row col" or "row,col".

    Raises:
        ValueError: The text is not two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected 'row col', got {text!r}")
    row, col = (int(part) for part in parts)
    return row, col


class ConsoleGame:
    """
    A single game played at the console.

    Game flow:
    1. The active player enters a move
    2. The move is applied to the board (or rejected)
    3. The board is redrawn and checked for an outcome
    4. Players alternate until someone wins or it's a tie
    """

    def __init__(
        self,
        size: int = GameConfig.BOARD_SIZE,
        first_player: Player = Player(GameConfig.FIRST_PLAYER),
        output: Callable[[str], None] = print
    ):
        """
        Initialize the game.

        Args:
            size: Board dimension N.
            first_player: Who moves first.
            output: Where status lines go (print by default).
        """
        self.board = GameBoard(size)
        self.current_player = Player(first_player)
        self.outcome: Optional[Outcome] = None
        self.output = output

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    def handle_move(self, row: int, col: int) -> bool:
        """
        Apply a move for the active player.

        Returns:
            True if the move was accepted, False otherwise.
        """
        if self.is_over:
            self.output("Game is already over!")
            return False

        try:
            self.board.mark(self.current_player, row, col)
        except MoveError as e:
            self.output(f"{GameConfig.INVALID_MOVE_MESSAGE} {e}")
            return False

        self.output(self.board.render())

        self.outcome = self.board.check_winner()
        if self.outcome is not None:
            self._show_game_result()
        else:
            self.current_player = self.current_player.opposite()

        return True

    def play(self, read: Optional[Callable[[str], str]] = None):
        """Main game loop. Reads moves with input() unless told otherwise."""
        read = read or input
        self.output(self.board.render())

        while not self.is_over:
            text = read(GameConfig.MOVE_PROMPT.format(player=self.current_player.value))
            try:
                row, col = parse_move(text)
            except ValueError as e:
                self.output(f"{GameConfig.INVALID_MOVE_MESSAGE} {e}")
                continue
            self.handle_move(row, col)

        return self.outcome

    def _show_game_result(self):
        """Show the final game result."""
        if self.outcome == Outcome.TIE:
            self.output(GameConfig.TIE_MESSAGE)
        else:
            self.output(GameConfig.WIN_MESSAGE.format(player=self.outcome.value))


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--size",
        type=int,
        default=GameConfig.BOARD_SIZE,
        help="Board size N (default: %(default)s)"
    )
    parser.add_argument(
        "--first",
        choices=[player.value for player in Player],
        default=GameConfig.FIRST_PLAYER,
        help="Player that moves first (default: %(default)s)"
    )

    args = parser.parse_args(argv)

    try:
        game = ConsoleGame(size=args.size, first_player=Player(args.first))
    except (TypeError, ValueError) as e:
        parser.error(str(e))

    try:
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
