"""
TicTacToe engine.
Bit-board positions, win/tie detection, and an optimal minimax opponent.
"""

from .board import Board, Player, PlayerView, make_default_board
from .move_transition import MoveTransition, TransitionStatus, NO_MOVE
from .win_checker import WinChecker, GameResult
from .ai_player import AIPlayer, choose_move

__version__ = "1.0.0"
