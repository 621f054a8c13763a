"""
Main entry point for TicTacToe.

Plays against the minimax computer either in the Tk window (default)
or in the console with --no-ui.

Console controls:
- Enter a square number 0-8 to move
- Enter 'h' for a hint
- Enter any other integer to quit
"""

import logging
import time

from tictactoe.board import Board, Player, make_default_board, BOARD_LENGTH
from tictactoe.win_checker import WinChecker, GameResult
from tictactoe.ai_player import AIPlayer
from tictactoe.config import setup_logging

logger = logging.getLogger(__name__)


MENU = (
    "\nMenu:\n"
    "0 1 2\n"
    "3 4 5\n"
    "6 7 8\n"
    "(Enter any other integer to quit, 'h' for a hint)\n"
)

RESULT_MESSAGES = {
    GameResult.USER_WINS: "You win!",
    GameResult.COMPUTER_WINS: "You Lose!",
    GameResult.TIE: "Tie!",
}


class QuitGame(Exception):
    """Raised when the user confirms they want to quit."""


class TextTacToe:
    """
    Console game against the computer.

    Game flow:
    1. User enters a square
    2. Computer calculates and plays its best response
    3. Board is printed
    4. Repeat until someone wins or it's a tie
    """

    def __init__(self, computer_first: bool = False):
        """
        Initialize the console game.

        Args:
            computer_first: If True, the computer opens every round.
        """
        self.computer_first = computer_first
        self.board: Board = make_default_board()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(Player.COMPUTER)
        self.advisor = AIPlayer(Player.USER)

    def run(self):
        """Play rounds until the user declines another one."""
        try:
            while True:
                self.play_round()
                if self._ask_yes_no("Play again? (y/n)>> ") != "y":
                    break
        except QuitGame:
            print("\nGame quit by user.")

    def play_round(self) -> GameResult:
        """
        Play one game from an empty board.

        Returns:
            How the game ended.
        """
        self.board = make_default_board()

        if self.computer_first:
            self._computer_move()
            self._print_board()

        while not self.win_checker.is_game_over(self.board):
            print(MENU)
            self._user_move()

            if not self.win_checker.is_game_over(self.board):
                self._computer_move()

            self._print_board()

        result = self.win_checker.get_result(self.board)
        print(f"{RESULT_MESSAGES[result]}\n")
        return result

    def _user_move(self):
        """Read moves until the board accepts one."""
        while True:
            move = self._read_move()
            transition = self.board.attempt_move(Player.USER, move)

            if transition.is_done:
                self.board = transition.board
                return

            if not 0 <= move < BOARD_LENGTH:
                if self._ask_yes_no("Quit? (y/n)>> ") == "y":
                    raise QuitGame()
            else:
                print(f"Square {move} is already occupied!")

    def _computer_move(self):
        """Play the computer's best move."""
        start = time.perf_counter()
        move = self.ai.choose_move(self.board)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "Computer chose square %d in %.2f ms (%d positions)",
            move, elapsed_ms, self.ai.positions_evaluated,
        )

        self.board = self.board.attempt_move(Player.COMPUTER, move).board

    def _read_move(self) -> int:
        """Prompt until the user types an integer."""
        while True:
            raw = input("Move (integer)>> ").strip()

            if raw.lower() == "h":
                print(self.advisor.get_move_suggestion(self.board))
                continue

            try:
                return int(raw)
            except ValueError:
                continue

    def _ask_yes_no(self, message: str) -> str:
        """Prompt until the answer starts with 'y' or 'n'."""
        while True:
            answer = input(message).strip().lower()
            if answer[:1] in ("y", "n"):
                return answer[0]

    def _print_board(self):
        print("\nBoard:")
        print(self.board)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a minimax computer")
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer make the first move"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()

    setup_logging()

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(computer_first=args.computer_first)
        ui.run()
        return

    print("\n" + "="*60)
    print("   TicTacToe - Console Mode")
    print("="*60)

    game = TextTacToe(computer_first=args.computer_first)

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
