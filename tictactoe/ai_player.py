"""
AI player for the tic-tac-toe engine.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

import logging
from typing import Dict

from .board import Board, Player, BOARD_LENGTH
from .config import GameConfig
from .move_transition import NO_MOVE

logger = logging.getLogger(__name__)

TERMINAL_SCORE = GameConfig.TERMINAL_SCORE
LIMIT = GameConfig.LIMIT


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, tie).

    Scores are from the AI's point of view: a win found after ``depth``
    plies is worth TERMINAL_SCORE - depth, a loss -TERMINAL_SCORE + depth,
    a tie 0. Faster wins and slower losses are preferred.
    """

    def __init__(self, player: Player = Player.COMPUTER):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: COMPUTER)
        """
        self.player = player
        self.opponent = player.opposite()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def choose_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        Moves are tried in ascending square order and a later move only
        replaces the best one if it scores strictly higher, so ties go to
        the lowest square.

        Args:
            board: Current board. The AI is assumed to be on move.

        Returns:
            Square index of the best move, or NO_MOVE if the board is full.
        """
        self.positions_evaluated = 0

        best_score = -LIMIT
        best_move = NO_MOVE

        for square in range(BOARD_LENGTH):
            transition = board.attempt_move(self.player, square)
            if not transition.is_done:
                continue

            score = self.evaluate(False, transition.board, 1, -LIMIT, LIMIT)

            if score > best_score:
                best_score = score
                best_move = transition.move

        logger.debug(
            "%s evaluated %d positions. Best move: %d (score: %d)",
            self.player.value, self.positions_evaluated, best_move, best_score,
        )
        return best_move

    def evaluate(
        self,
        is_maximizing: bool,
        board: Board,
        depth: int,
        alpha: int,
        beta: int
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            is_maximizing: True if it's the AI's turn at this board.
            board: Board to evaluate.
            depth: Plies played since the root of the search.
            alpha: Best score the AI is already guaranteed.
            beta: Best score the opponent is already guaranteed.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        # Check terminal states
        if board.has_win(self.player):
            return TERMINAL_SCORE - depth
        if board.has_win(self.opponent):
            return -TERMINAL_SCORE + depth
        if board.is_full():
            return 0

        if is_maximizing:
            score = -LIMIT
            for square in range(BOARD_LENGTH):
                transition = board.attempt_move(self.player, square)
                if not transition.is_done:
                    continue
                score = max(
                    score,
                    self.evaluate(False, transition.board, depth + 1, alpha, beta)
                )
                alpha = score
                if alpha >= beta:
                    return score  # Prune
        else:
            score = LIMIT
            for square in range(BOARD_LENGTH):
                transition = board.attempt_move(self.opponent, square)
                if not transition.is_done:
                    continue
                score = min(
                    score,
                    self.evaluate(True, transition.board, depth + 1, alpha, beta)
                )
                beta = score
                if alpha >= beta:
                    return score  # Prune
        return score

    def score_moves(self, board: Board) -> Dict[int, int]:
        """
        Score every legal move the same way choose_move does.

        Returns:
            Mapping of square index to score, in ascending square order.
        """
        scores = {}
        for square in board.empty_squares():
            transition = board.attempt_move(self.player, square)
            scores[square] = self.evaluate(False, transition.board, 1, -LIMIT, LIMIT)
        return scores

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        move = self.choose_move(board)

        if move == NO_MOVE:
            return "No moves available!"

        row, col = divmod(move, GameConfig.BOARD_SIZE)
        marker = board.marker_of(self.player)

        return f"Place {marker} on square {move} (row {row}, col {col})"


def choose_move(board: Board, player: Player = Player.COMPUTER) -> int:
    """Pick the best move for ``player`` (the computer by default)."""
    return AIPlayer(player).choose_move(board)
