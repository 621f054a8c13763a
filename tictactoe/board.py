"""
Board model for the tic-tac-toe engine.

Each player's squares are kept as a 9-bit bit-board. Square 0 (top left)
is the highest bit and square 8 (bottom right) the lowest:

    0 1 2        0x100 0x080 0x040
    3 4 5   ->   0x020 0x010 0x008
    6 7 8        0x004 0x002 0x001

Boards are immutable. A move never changes a Board; it returns a
MoveTransition holding a new one.
"""

from enum import Enum
from dataclasses import dataclass, field, replace
from typing import List, Tuple

from .config import GameConfig
from .move_transition import MoveTransition, TransitionStatus, NO_MOVE


class Player(Enum):
    """
    The two players in the game.

    USER moves first by convention, COMPUTER second.
    """
    USER = "user"
    COMPUTER = "computer"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.COMPUTER if self == Player.USER else Player.USER


BOARD_LENGTH = GameConfig.BOARD_LENGTH

# One bit per square, square 0 is the highest bit
SQUARE_MASKS: Tuple[int, ...] = tuple(
    1 << (BOARD_LENGTH - 1 - i) for i in range(BOARD_LENGTH)
)

# Winning combinations, AND-ed against a player's bit-board
ROW_ZERO_MASK = 0x01C0
ROW_ONE_MASK = 0x0038
ROW_TWO_MASK = 0x0007
COL_ZERO_MASK = 0x0124
COL_ONE_MASK = 0x0092
COL_TWO_MASK = 0x0049
LR_DIAG_MASK = 0x0111   # 0, 4, 8
RL_DIAG_MASK = 0x0054   # 2, 4, 6

# Rows, then columns, then diagonals
LINE_MASKS: Tuple[int, ...] = (
    ROW_ZERO_MASK, ROW_ONE_MASK, ROW_TWO_MASK,
    COL_ZERO_MASK, COL_ONE_MASK, COL_TWO_MASK,
    LR_DIAG_MASK, RL_DIAG_MASK,
)

FULL_BOARD_MASK = 0x01FF


def find_winning_line(squares: int) -> int:
    """
    Get the first line mask fully covered by a bit-board.

    Args:
        squares: A player's bit-board.

    Returns:
        The matching line mask, or 0 if there is none.
    """
    for mask in LINE_MASKS:
        if squares & mask == mask:
            return mask
    return 0


def mask_to_squares(mask: int) -> Tuple[int, ...]:
    """Convert a bit mask into the ascending square indices it covers."""
    return tuple(i for i, bit in enumerate(SQUARE_MASKS) if mask & bit)


def _is_square_index(square_index) -> bool:
    return (
        isinstance(square_index, int)
        and not isinstance(square_index, bool)
        and 0 <= square_index < BOARD_LENGTH
    )


@dataclass(frozen=True)
class Board:
    """
    Immutable tic-tac-toe position.

    Every field is optional, so the constructor doubles as the board
    builder:

        Board(user_squares=0x180, computer_squares=0x010)

    The two bit-boards must be disjoint. Only this module creates
    boards from moves, so that is not checked here.
    """

    user_squares: int = 0
    computer_squares: int = 0
    user_marker: str = GameConfig.USER_MARKER
    computer_marker: str = GameConfig.COMPUTER_MARKER
    empty_marker: str = GameConfig.EMPTY_MARKER

    # Derived once in __post_init__
    all_squares: int = field(init=False, repr=False, compare=False)
    _is_full: bool = field(init=False, repr=False, compare=False)
    _user_line: int = field(init=False, repr=False, compare=False)
    _computer_line: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        all_squares = self.user_squares | self.computer_squares
        object.__setattr__(self, "all_squares", all_squares)
        object.__setattr__(
            self, "_is_full", (all_squares & FULL_BOARD_MASK) == FULL_BOARD_MASK
        )
        object.__setattr__(self, "_user_line", find_winning_line(self.user_squares))
        object.__setattr__(
            self, "_computer_line", find_winning_line(self.computer_squares)
        )

    # ------------------------------------------------------------------
    # Per-player accessors
    # ------------------------------------------------------------------

    def squares_of(self, player: Player) -> int:
        """Get the bit-board of a player."""
        return self.user_squares if player == Player.USER else self.computer_squares

    def marker_of(self, player: Player) -> str:
        """Get the marker of a player."""
        return self.user_marker if player == Player.USER else self.computer_marker

    def player_view(self, player: Player) -> "PlayerView":
        """Get a view of this board bound to one player."""
        return PlayerView(self, player)

    @property
    def user(self) -> "PlayerView":
        return PlayerView(self, Player.USER)

    @property
    def computer(self) -> "PlayerView":
        return PlayerView(self, Player.COMPUTER)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_full(self) -> bool:
        """True if every square is occupied."""
        return self._is_full

    def has_win(self, player: Player) -> bool:
        """True if the player covers a row, column or diagonal."""
        return self.winning_line(player) != 0

    def winning_line(self, player: Player) -> int:
        """
        Get the line mask the player has completed.

        Returns:
            The first completed line (rows, columns, diagonals), or 0.
        """
        return self._user_line if player == Player.USER else self._computer_line

    def owns_square(self, player: Player, square_index: int) -> bool:
        """True if the player occupies the square. False if out of range."""
        if not _is_square_index(square_index):
            return False
        return self.squares_of(player) & SQUARE_MASKS[square_index] != 0

    def is_empty(self, square_index: int) -> bool:
        """True if the square exists and nobody occupies it."""
        if not _is_square_index(square_index):
            return False
        return self.all_squares & SQUARE_MASKS[square_index] == 0

    def empty_squares(self) -> List[int]:
        """Get all empty squares in ascending order."""
        return [i for i, bit in enumerate(SQUARE_MASKS) if not self.all_squares & bit]

    def move_count(self) -> int:
        """Number of occupied squares."""
        return bin(self.all_squares & FULL_BOARD_MASK).count("1")

    def highlight_squares(self) -> Tuple[int, ...]:
        """
        Get the squares of the winning line, if any.

        The user's line is reported first. Only one player can win in a
        game reached by alternating moves.
        """
        line = self._user_line or self._computer_line
        return mask_to_squares(line)

    def is_highlighted(self, square_index: int) -> bool:
        """True if the square belongs to the winning line."""
        return square_index in self.highlight_squares()

    def square_marker(self, square_index: int) -> str:
        """
        Get the display marker of a square.

        Args:
            square_index: Square to look up (0-8).

        Returns:
            The owner's marker, or the empty marker for empty squares
            and out of range indices.
        """
        if not _is_square_index(square_index):
            return self.empty_marker
        mask = SQUARE_MASKS[square_index]
        if self.user_squares & mask:
            return self.user_marker
        if self.computer_squares & mask:
            return self.computer_marker
        return self.empty_marker

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def attempt_move(self, player: Player, square_index: int) -> MoveTransition:
        """
        Try to place the player's marker on a square.

        Args:
            player: Who is moving.
            square_index: Square to occupy (0-8).

        Returns:
            ACCEPTED with the new board and the square, or REJECTED with
            this board and NO_MOVE if the square is out of range or taken.
        """
        if self.is_empty(square_index):
            mask = SQUARE_MASKS[square_index]
            if player == Player.USER:
                new_board = replace(self, user_squares=self.user_squares | mask)
            else:
                new_board = replace(self, computer_squares=self.computer_squares | mask)
            return MoveTransition(TransitionStatus.ACCEPTED, new_board, square_index)

        return MoveTransition(TransitionStatus.REJECTED, self, NO_MOVE)

    def __str__(self) -> str:
        rows = []
        size = GameConfig.BOARD_SIZE
        for start in range(0, BOARD_LENGTH, size):
            cells = "".join(
                " " + self.square_marker(i) for i in range(start, start + size)
            )
            rows.append("\n" + cells)
        return "".join(rows)


class PlayerView:
    """
    One player's side of a Board.

    Has no state of its own; everything is read from the board.
    """

    def __init__(self, board: Board, player: Player):
        self.board = board
        self.player = player

    @property
    def squares(self) -> int:
        return self.board.squares_of(self.player)

    @property
    def marker(self) -> str:
        return self.board.marker_of(self.player)

    @property
    def has_win(self) -> bool:
        return self.board.has_win(self.player)

    @property
    def winning_line(self) -> int:
        return self.board.winning_line(self.player)

    def owns_square(self, square_index: int) -> bool:
        return self.board.owns_square(self.player, square_index)

    def make_move(self, square_index: int) -> MoveTransition:
        """Attempt a move for this player on the bound board."""
        return self.board.attempt_move(self.player, square_index)

    def __repr__(self) -> str:
        return f"PlayerView({self.player.value}, squares={self.squares:#05x})"


def make_default_board() -> Board:
    """Create an empty board with the default markers."""
    return Board()
