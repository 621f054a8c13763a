"""
TicTacToe UI
A graphical interface for playing against the computer using Tkinter.

Shows:
- The 3x3 board (click a square to move)
- Winning line highlighted when the game ends
- Game status
"""

import logging
import threading
import tkinter as tk
from tkinter import ttk, messagebox
from typing import Dict, List, Tuple

from PIL import ImageTk

from tictactoe.board import Board, Player, make_default_board, BOARD_LENGTH
from tictactoe.win_checker import WinChecker, GameResult
from tictactoe.ai_player import AIPlayer
from tictactoe.tiles import TileRenderer
from tictactoe.config import GameConfig, UIConfig, setup_logging

logger = logging.getLogger(__name__)


RESULT_MESSAGES = {
    GameResult.USER_WINS: "You Win!",
    GameResult.COMPUTER_WINS: "You Lose!",
    GameResult.TIE: "It's a Tie!",
}


class TicTacToeUI:
    """
    Main UI class for the TicTacToe game.

    The user plays on the Tk thread; the computer searches on a
    background thread and hands its move back with root.after().
    """

    def __init__(self, computer_first: bool = False):
        """Initialize the UI."""
        self.computer_first = computer_first
        self.is_thinking = False
        self.is_game_over = False

        # Game logic
        self.board: Board = make_default_board()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(Player.COMPUTER)

        # Rendering
        self.renderer = TileRenderer(UIConfig.TILE_SIZE)
        self._photos: Dict[Tuple[str, bool], ImageTk.PhotoImage] = {}

        # Create UI
        self._create_ui()
        self._draw_board()

        if self.computer_first:
            self._start_computer_move()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(UIConfig.WINDOW_TITLE)
        self.root.configure(bg=UIConfig.BACKGROUND_COLOR)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=UIConfig.BACKGROUND_COLOR)
        style.configure('Status.TLabel', background=UIConfig.BACKGROUND_COLOR,
                        foreground=UIConfig.HIGHLIGHT_COLOR, font=('Segoe UI', 14, 'bold'))

        # Board grid
        board_frame = tk.Frame(self.root, bg=UIConfig.BACKGROUND_COLOR,
                               padx=UIConfig.BORDER_THICKNESS,
                               pady=UIConfig.BORDER_THICKNESS)
        board_frame.pack()

        self.square_labels: List[tk.Label] = []
        for square in range(BOARD_LENGTH):
            row, col = divmod(square, GameConfig.BOARD_SIZE)
            label = tk.Label(board_frame, bg=UIConfig.BACKGROUND_COLOR, borderwidth=0)
            label.grid(row=row, column=col,
                       padx=UIConfig.BORDER_THICKNESS // 2,
                       pady=UIConfig.BORDER_THICKNESS // 2)
            label.bind("<Button-1>", lambda event, s=square: self._on_square_clicked(s))
            self.square_labels.append(label)

        # Status
        self.status_label = ttk.Label(self.root, text="Your turn", style='Status.TLabel')
        self.status_label.pack(pady=10)

        # Control buttons
        control_frame = ttk.Frame(self.root)
        control_frame.pack(pady=(0, 10))

        tk.Button(
            control_frame,
            text="🔄 Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _draw_board(self):
        """Update every square image from the current board."""
        for square, label in enumerate(self.square_labels):
            key = (self.board.square_marker(square), self.board.is_highlighted(square))
            photo = self._photos.get(key)
            if photo is None:
                photo = ImageTk.PhotoImage(self.renderer.render(*key))
                self._photos[key] = photo
            label.configure(image=photo)
            label.image = photo  # Keep reference

    def _on_square_clicked(self, square: int):
        """Handle a click on a square."""
        if self.is_thinking or self.is_game_over:
            return

        transition = self.board.attempt_move(Player.USER, square)
        if not transition.is_done:
            return

        self.board = transition.board
        self._draw_board()

        if not self._check_game_over():
            self._start_computer_move()

    def _start_computer_move(self):
        """Search for the computer's move in a background thread."""
        self.is_thinking = True
        self.status_label.configure(text="Computer is thinking...")

        board = self.board
        threading.Thread(target=self._computer_move, args=(board,), daemon=True).start()

    def _computer_move(self, board: Board):
        """Compute the computer's move (runs in background thread)."""
        try:
            move = self.ai.choose_move(board)
        except Exception as e:
            logger.exception("Computer move failed")
            message = f"ERROR: {str(e)[:30]}"
            self.root.after(0, lambda: self.status_label.configure(text=message))
            return

        self.root.after(
            UIConfig.COMPUTER_MOVE_DELAY_MS,
            lambda: self._apply_computer_move(board, move)
        )

    def _apply_computer_move(self, board: Board, move: int):
        """Play the computer's move (runs on UI thread)."""
        # Game was reset while the computer was thinking
        if board is not self.board:
            return

        self.is_thinking = False
        transition = self.board.attempt_move(Player.COMPUTER, move)
        if transition.is_done:
            self.board = transition.board
            self._draw_board()

        if not self._check_game_over():
            self.status_label.configure(text="Your turn")

    def _check_game_over(self) -> bool:
        """Announce the result if the game has ended."""
        result = self.win_checker.get_result(self.board)
        if not result.is_game_over:
            return False

        self.is_game_over = True
        message = RESULT_MESSAGES[result]
        self.status_label.configure(text=message)
        self.root.after(0, lambda: self._ask_play_again(message))
        return True

    def _ask_play_again(self, message: str):
        if messagebox.askyesno(UIConfig.WINDOW_TITLE, f"{message} Play Again?"):
            self._reset_game()
        else:
            self._quit()

    def _reset_game(self):
        """Reset the game."""
        logger.info("Resetting game")
        self.board = make_default_board()
        self.is_thinking = False
        self.is_game_over = False
        self._draw_board()
        self.status_label.configure(text="Your turn")

        if self.computer_first:
            self._start_computer_move()

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer make the first move"
    )

    args = parser.parse_args()

    setup_logging()

    ui = TicTacToeUI(computer_first=args.computer_first)
    ui.run()


if __name__ == "__main__":
    main()
