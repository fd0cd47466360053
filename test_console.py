"""
Tests for the console front end in main.py.

Usage:
    pytest test_console.py
"""

import sys

import pytest

from main import ConsoleGame, main, parse_move
from tictactoe import GameConfig, Outcome, Player


class Recorder:
    """Collects everything the game would print."""

    def __init__(self):
        self.lines = []

    def __call__(self, text):
        self.lines.append(text)


def scripted(moves):
    """Return a read() function that replays moves in order."""
    it = iter(moves)
    return lambda prompt: next(it)


@pytest.mark.parametrize("text, expected", [
    ("0 1", (0, 1)),
    ("2,2", (2, 2)),
    ("  1 ,  0 ", (1, 0)),
    ("-1 3", (-1, 3)),
])
def test_parse_move(text, expected):
    assert parse_move(text) == expected


@pytest.mark.parametrize("text", ["", "1", "1 2 3", "a b", "1.5 2"])
def test_parse_move_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_move(text)


def test_players_alternate():
    game = ConsoleGame(output=Recorder())
    assert game.current_player is Player.X
    assert game.handle_move(0, 0)
    assert game.current_player is Player.O
    assert game.handle_move(1, 1)
    assert game.current_player is Player.X
    assert game.board.get_square(1, 1).value is Player.O


def test_first_player_option():
    game = ConsoleGame(first_player=Player.O, output=Recorder())
    game.handle_move(0, 0)
    assert game.board.get_square(0, 0).value is Player.O


def test_rejected_move_keeps_turn():
    out = Recorder()
    game = ConsoleGame(output=out)
    game.handle_move(0, 0)

    assert not game.handle_move(0, 0)
    assert game.current_player is Player.O
    assert not game.handle_move(3, 0)
    assert game.current_player is Player.O
    assert out.lines[-1].startswith(GameConfig.INVALID_MOVE_MESSAGE)


def test_board_redrawn_after_move():
    out = Recorder()
    game = ConsoleGame(output=out)
    game.handle_move(1, 1)
    assert out.lines[-1] == game.board.render()


def test_win_freezes_game():
    out = Recorder()
    game = ConsoleGame(output=out)
    for row, col in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        assert game.handle_move(row, col)

    assert game.is_over
    assert game.outcome is Outcome.X
    assert out.lines[-1] == GameConfig.WIN_MESSAGE.format(player="X")

    assert not game.handle_move(2, 2)
    assert game.board.get_square(2, 2).is_empty


def test_tie():
    out = Recorder()
    game = ConsoleGame(output=out)
    # X O X / X O O / O X X
    for row, col in [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
                     (1, 2), (2, 1), (2, 0), (2, 2)]:
        assert game.handle_move(row, col)

    assert game.outcome is Outcome.TIE
    assert out.lines[-1] == GameConfig.TIE_MESSAGE


def test_play_loop_skips_bad_input():
    out = Recorder()
    game = ConsoleGame(output=out)
    moves = ["nonsense", "0 0", "0 0", "1 0", "0 1", "1 1", "0,2"]

    assert game.play(read=scripted(moves)) is Outcome.X
    invalid = [line for line in out.lines if line.startswith(GameConfig.INVALID_MOVE_MESSAGE)]
    assert len(invalid) == 2


def test_larger_board_game():
    game = ConsoleGame(size=4, output=Recorder())
    moves = ["0 0", "1 0", "0 1", "1 1", "0 2", "1 2", "0 3"]
    assert game.play(read=scripted(moves)) is Outcome.X


def test_main_runs_a_game(monkeypatch, capsys):
    moves = iter(["0 0", "1 0", "0 1", "1 1", "0 2"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(moves))

    main(["--size", "3"])

    captured = capsys.readouterr().out
    assert GameConfig.WIN_MESSAGE.format(player="X") in captured
    assert "Goodbye!" in captured


def test_main_handles_end_of_input(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    main([])
    assert "Goodbye!" in capsys.readouterr().out


def test_main_rejects_bad_size():
    with pytest.raises(SystemExit):
        main(["--size", "0"])


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-q"]))
