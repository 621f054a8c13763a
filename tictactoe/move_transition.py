"""
Move transitions for the tic-tac-toe engine.
Packages the outcome of a move attempt with the resulting board.
"""

from enum import Enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board


# Move value reported when no move was made
NO_MOVE = -1


class TransitionStatus(Enum):
    """Outcome of a move attempt."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def is_done(self) -> bool:
        """True if the move was played."""
        return self is TransitionStatus.ACCEPTED


@dataclass(frozen=True)
class MoveTransition:
    """
    Result of a move attempt.

    A rejected transition carries the unchanged board and NO_MOVE.
    """
    status: TransitionStatus
    board: "Board"
    move: int = NO_MOVE

    @property
    def is_done(self) -> bool:
        return self.status.is_done
