"""
Tests for the minimax AI player.

Tests verify:
1. Terminal positions are scored with depth-sensitive values
2. The AI takes wins, blocks losses and opens correctly
3. Ties between equal moves go to the lowest square
4. The AI never loses, whatever the user plays
"""

import pytest

from tictactoe.board import (
    Board,
    Player,
    SQUARE_MASKS,
    ROW_ZERO_MASK,
    make_default_board,
)
from tictactoe.move_transition import NO_MOVE
from tictactoe.ai_player import AIPlayer, choose_move, TERMINAL_SCORE, LIMIT


def squares(*indices):
    mask = 0
    for i in indices:
        mask |= SQUARE_MASKS[i]
    return mask


def board_with(user=(), computer=()):
    return Board(user_squares=squares(*user), computer_squares=squares(*computer))


# Scoring


def test_score_constants():
    assert TERMINAL_SCORE == 10
    assert LIMIT == 11
    assert LIMIT > TERMINAL_SCORE > 9


def test_maximizer_win_scores_terminal_minus_depth():
    ai = AIPlayer(Player.COMPUTER)
    board = Board(computer_squares=ROW_ZERO_MASK, user_squares=squares(3, 4))
    assert ai.evaluate(True, board, 3, -LIMIT, LIMIT) == TERMINAL_SCORE - 3
    assert ai.evaluate(False, board, 0, -LIMIT, LIMIT) == TERMINAL_SCORE


def test_minimizer_win_scores_negative_terminal_plus_depth():
    ai = AIPlayer(Player.COMPUTER)
    board = Board(user_squares=ROW_ZERO_MASK, computer_squares=squares(3, 4))
    assert ai.evaluate(True, board, 5, -LIMIT, LIMIT) == -TERMINAL_SCORE + 5


def test_scores_follow_the_searching_side():
    ai = AIPlayer(Player.USER)
    board = Board(user_squares=ROW_ZERO_MASK, computer_squares=squares(3, 4))
    assert ai.evaluate(False, board, 2, -LIMIT, LIMIT) == TERMINAL_SCORE - 2


def test_full_board_without_line_scores_zero():
    ai = AIPlayer()
    board = board_with(user=(0, 2, 3, 7, 8), computer=(1, 4, 5, 6))
    assert ai.evaluate(True, board, 9, -LIMIT, LIMIT) == 0


def test_empty_board_is_a_draw():
    ai = AIPlayer(Player.USER)
    assert ai.evaluate(True, make_default_board(), 0, -LIMIT, LIMIT) == 0


# Move choice


def test_takes_immediate_win():
    # Computer can complete the middle row at 5
    board = board_with(user=(0, 1, 8), computer=(3, 4))
    ai = AIPlayer()
    assert ai.choose_move(board) == 5
    assert ai.score_moves(board)[5] == TERMINAL_SCORE - 1


def test_blocks_user_win():
    board = board_with(user=(0, 1), computer=(4,))
    assert choose_move(board) == 2


def test_prefers_faster_win():
    ai = AIPlayer()
    board = board_with(user=(0, 1, 8), computer=(3, 4))
    scores = ai.score_moves(board)
    assert scores[5] == max(scores.values())
    assert all(score < scores[5] for square, score in scores.items() if square != 5)


def test_answers_center_with_corner():
    board = make_default_board().attempt_move(Player.USER, 4).board
    move = choose_move(board)
    assert move in {0, 2, 6, 8}

    scores = AIPlayer().score_moves(board)
    for edge in (1, 3, 5, 7):
        assert scores[edge] < 0
    for corner in (0, 2, 6, 8):
        assert scores[corner] == 0


def test_equal_scores_pick_lowest_square():
    # Both 2 (top row) and 6 (left column) win at once
    board = board_with(user=(4, 5, 8), computer=(0, 1, 3))
    ai = AIPlayer()
    scores = ai.score_moves(board)
    assert scores[2] == scores[6] == TERMINAL_SCORE - 1

    assert ai.choose_move(board) == 2
    assert ai.choose_move(board) == 2
    assert choose_move(board) == 2


def test_opening_move_is_first_square():
    # Every opening is a draw, so the lowest square wins the tie
    assert choose_move(make_default_board()) == 0


def test_full_board_has_no_move():
    board = board_with(user=(0, 2, 3, 7, 8), computer=(1, 4, 5, 6))
    assert choose_move(board) == NO_MOVE


def test_search_for_user_side():
    board = board_with(user=(0, 1), computer=(4, 8))
    assert choose_move(board, Player.USER) == 2


def test_pruning_skips_part_of_the_tree():
    ai = AIPlayer(Player.USER)
    ai.choose_move(make_default_board())
    # The full game tree has 549946 nodes
    assert 0 < ai.positions_evaluated < 549946


def test_move_suggestion():
    ai = AIPlayer(Player.USER)
    board = board_with(user=(0, 1), computer=(4, 8))
    assert ai.get_move_suggestion(board) == "Place x on square 2 (row 0, col 2)"

    full = board_with(user=(0, 2, 3, 7, 8), computer=(1, 4, 5, 6))
    assert ai.get_move_suggestion(full) == "No moves available!"


# Optimality


def _user_never_wins(board, ai, seen):
    """Try every user move from ``board``; the AI answers each one."""
    if board in seen:
        return
    seen.add(board)

    for square in board.empty_squares():
        after_user = board.attempt_move(Player.USER, square).board
        assert not after_user.has_win(Player.USER), f"AI lost:{after_user}"
        if after_user.is_full():
            continue

        move = ai.choose_move(after_user)
        transition = after_user.attempt_move(Player.COMPUTER, move)
        assert transition.is_done

        after_ai = transition.board
        if after_ai.has_win(Player.COMPUTER) or after_ai.is_full():
            continue
        _user_never_wins(after_ai, ai, seen)


@pytest.mark.parametrize("computer_first", [False, True])
def test_ai_never_loses(computer_first):
    ai = AIPlayer(Player.COMPUTER)
    board = make_default_board()
    if computer_first:
        board = board.attempt_move(Player.COMPUTER, ai.choose_move(board)).board
    _user_never_wins(board, ai, set())
