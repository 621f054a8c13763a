"""
Test script for TicTacToe modules.
Plays scripted console games to verify all components work together.

Run with pytest, or directly:  python test_modules.py
"""

import sys
import builtins
import itertools

import pytest

from tictactoe import (
    Player,
    make_default_board,
    choose_move,
    WinChecker,
    GameResult,
    TransitionStatus,
)
from main import TextTacToe, QuitGame, MENU


def feed_input(monkeypatch, answers):
    """Replace input() with a scripted sequence of answers."""
    answers = iter(answers)
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))


def test_game_logic():
    """Play a full game between the search and itself through the public API."""
    board = make_default_board()
    checker = WinChecker()
    player = Player.USER

    while not checker.is_game_over(board):
        move = choose_move(board, player)
        transition = board.attempt_move(player, move)
        assert transition.status == TransitionStatus.ACCEPTED
        board = transition.board
        player = player.opposite()

    # Perfect play from both sides is always a tie
    assert checker.get_result(board) == GameResult.TIE


def test_console_round_never_lost(monkeypatch, capsys):
    """User tries squares in order; occupied ones are rejected and re-prompted."""
    feed_input(monkeypatch, itertools.cycle([str(i) for i in range(9)]))

    game = TextTacToe()
    result = game.play_round()

    out = capsys.readouterr().out
    assert result in (GameResult.COMPUTER_WINS, GameResult.TIE)
    assert "You win!" not in out
    assert "Board:" in out
    assert MENU in out


def test_console_round_computer_first(monkeypatch, capsys):
    feed_input(monkeypatch, itertools.cycle([str(i) for i in range(9)]))

    game = TextTacToe(computer_first=True)
    result = game.play_round()

    assert result in (GameResult.COMPUTER_WINS, GameResult.TIE)
    # Computer opened on square 0
    assert game.board.owns_square(Player.COMPUTER, 0)


def test_console_ignores_garbage_and_occupied(monkeypatch, capsys):
    # 'abc' is ignored, then 4 is played; the computer answers 0, so 0 is rejected
    feed_input(monkeypatch, ["abc", "", "4", "0", "h"] + [str(i) for i in range(9)] * 3)

    game = TextTacToe()
    game.play_round()

    out = capsys.readouterr().out
    assert "Square 0 is already occupied!" in out
    assert "Place x on square" in out
    assert game.board.owns_square(Player.USER, 4)


def test_console_quit(monkeypatch, capsys):
    feed_input(monkeypatch, ["42", "n", "12", "y"])

    game = TextTacToe()
    with pytest.raises(QuitGame):
        game.play_round()

    game_run = TextTacToe()
    feed_input(monkeypatch, ["-1", "yes"])
    game_run.run()
    assert "Game quit by user." in capsys.readouterr().out


def test_console_play_again(monkeypatch, capsys):
    moves = [str(i) for i in range(9)] * 2
    feed_input(monkeypatch, moves + ["maybe", "y"] + moves + ["n"])

    TextTacToe().run()

    out = capsys.readouterr().out
    assert out.count("Tie!") + out.count("You Lose!") == 2


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)
    return pytest.main([__file__, "test_board.py", "test_win_checker.py",
                        "test_ai_player.py", "test_tiles.py", "-v"])


if __name__ == "__main__":
    sys.exit(run_all_tests())
