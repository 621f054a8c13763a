"""
Win checker for the tic-tac-toe engine.
Reports whether a player has won or if the game is a tie.
"""

from enum import Enum
from typing import Optional, Tuple

from .board import Board, Player, mask_to_squares


class GameResult(Enum):
    """Status of a game at a given board."""
    IN_PROGRESS = "in_progress"
    USER_WINS = "user_wins"
    COMPUTER_WINS = "computer_wins"
    TIE = "tie"

    @property
    def is_game_over(self) -> bool:
        return self is not GameResult.IN_PROGRESS


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 markers of the same player in a row
    (horizontally, vertically, or diagonally). The board works these out
    when it is built, so every check here is a lookup.
    """

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The current board.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in (Player.USER, Player.COMPUTER):
            if board.has_win(player):
                return player
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a tie: every square taken and no winner.

        Args:
            board: The current board.

        Returns:
            True if the game is a tie.
        """
        return board.is_full() and self.check_winner(board) is None

    def is_game_over(self, board: Board) -> bool:
        """True if someone has won or the board is full."""
        return self.check_winner(board) is not None or board.is_full()

    def get_result(self, board: Board) -> GameResult:
        """Classify the board as won, tied, or still in progress."""
        winner = self.check_winner(board)
        if winner == Player.USER:
            return GameResult.USER_WINS
        if winner == Player.COMPUTER:
            return GameResult.COMPUTER_WINS
        if board.is_full():
            return GameResult.TIE
        return GameResult.IN_PROGRESS

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, ...]]:
        """
        Get the winning line if there is one.

        Args:
            board: The current board.

        Returns:
            The square indices of the line, or None.
        """
        winner = self.check_winner(board)
        if winner is None:
            return None
        return mask_to_squares(board.winning_line(winner))
