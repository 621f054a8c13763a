"""
Configuration for the tic-tac-toe engine and its front ends.
All the settings for markers, search scoring, the Tk board, and logging.
"""

import os
import logging


class GameConfig:
    """
    Configuration class for the board and the search engine.
    Change the markers here to restyle the text game.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    BOARD_LENGTH = BOARD_SIZE * BOARD_SIZE  # 9 squares

    # Default markers for each player and for empty squares
    USER_MARKER = "x"
    COMPUTER_MARKER = "o"
    EMPTY_MARKER = "-"

    # ==================== SEARCH SETTINGS ====================
    # Score of a win found at depth 0. Must be larger than the
    # deepest possible search (9 plies).
    TERMINAL_SCORE = 10

    # Alpha/beta window bound, strictly larger than TERMINAL_SCORE
    LIMIT = 11


class UIConfig:
    """
    Configuration for the graphical board (ui.py).
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "JTicTac"
    TILE_SIZE = 200          # Pixels per square
    BORDER_THICKNESS = 10    # Pixels between squares

    # ==================== COLORS ====================
    BACKGROUND_COLOR = "#000000"
    TILE_COLOR = "#1a1a2e"
    USER_COLOR = "#00d4ff"
    COMPUTER_COLOR = "#f87171"
    HIGHLIGHT_COLOR = "#ffd700"   # Squares of the winning line
    STROKE_WIDTH = 18

    # ==================== TIMING ====================
    # Pause before the computer's reply is shown (milliseconds)
    COMPUTER_MOVE_DELAY_MS = 500


# Logging level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("TICTACTOE_LOG_LEVEL", "WARNING").upper()


def setup_logging() -> None:
    """Configure root logging once, controlled by env var TICTACTOE_LOG_LEVEL."""
    if getattr(setup_logging, "_configured", False):
        return
    level: int = getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
