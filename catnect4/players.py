"""
Players for Catnect4.

Both players expose ``get_move(game)`` returning a column index. The human
player reads it from the console; the minimax player asks the search engine.
"""

import logging
import random
from typing import Callable, List, Optional

from .board import Board
from .config import MAX_DEPTH, AI_COMMENTS
from .evaluation import Evaluator
from .game import Connect4
from .search import MinimaxSearch

logger = logging.getLogger(__name__)


def render_board(board: Board, player_marker: str = 'X', opponent_marker: str = 'O',
                 empty_marker: str = '.', color: bool = True) -> str:
    """Render ``board`` for the console."""
    return board.render(player_marker, opponent_marker, empty_marker, color)


class HumanPlayer:
    """Human player for interactive gameplay."""

    def __init__(self, name: str = "Player",
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.name = name
        self.input_fn = input_fn
        self.output_fn = output_fn

    def get_move(self, game_state: Connect4) -> int:
        """
        Read a column from the console.

        Only the number itself is checked here; whether the column can take
        a piece is decided by ``Connect4.make_move``.
        """
        while True:
            answer = self.input_fn(f"{self.name}, enter your column (0-{game_state.cols - 1}): ")
            try:
                return int(answer.strip())
            except ValueError:
                logger.debug(f"Rejected non-numeric input {answer!r}")
                self.output_fn("Please enter a valid integer.")


class MinimaxPlayer:
    """Automated opponent driven by the minimax search."""

    def __init__(self, depth: int = MAX_DEPTH, evaluator: Optional[Evaluator] = None,
                 name: str = "AI"):
        self.name = name
        self.search = MinimaxSearch(depth=depth, evaluator=evaluator)

    def get_move(self, game_state: Connect4) -> Optional[int]:
        """Best column for the opponent, or None on a full board."""
        return self.search.best_move(game_state.board)


class Commentator:
    """
    Picks the remark printed after each opponent move.

    Args:
        comments: Remarks to choose from
        rng: Source of randomness, pass a seeded ``random.Random`` for
            reproducible output
    """

    def __init__(self, comments: Optional[List[str]] = None,
                 rng: Optional[random.Random] = None):
        self.comments = list(comments) if comments is not None else list(AI_COMMENTS)
        if not self.comments:
            raise ValueError("Commentator needs at least one comment")
        self.rng = rng or random.Random()

    def comment(self) -> str:
        return self.rng.choice(self.comments)
