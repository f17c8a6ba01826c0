"""
Minimax search with alpha-beta pruning for the automated opponent.

The search runs directly on the caller's board: each candidate move is
placed, searched and undone before the next one is tried, so the board
handed to ``best_move`` is left exactly as it was found.
"""

import logging
import math
import time
from typing import List, Optional

from .board import Board, Piece
from .config import MAX_DEPTH, WIN_SCORE
from .evaluation import Evaluator

logger = logging.getLogger(__name__)

INF = math.inf


class MinimaxSearch:
    """
    Fixed-depth minimax search.

    The opponent's piece (``Piece.OPPONENT``) is the maximizing side and
    the human player's piece the minimizing side.

    Attributes:
        max_depth (int): Plies searched below each candidate move
        evaluator (Evaluator): Scores positions at the depth limit
        nodes (int): Positions visited by the last ``best_move`` call
    """

    def __init__(self, depth: int = MAX_DEPTH, evaluator: Optional[Evaluator] = None):
        if depth < 0:
            raise ValueError("Search depth cannot be negative")
        self.max_depth = depth
        self.evaluator = evaluator or Evaluator()
        self.nodes = 0

    def minimax(self, board: Board, depth: int, maximizing: bool,
                alpha: float = -INF, beta: float = INF) -> float:
        """
        Best score reachable from the current position.

        Args:
            board: Position to search, restored before returning
            depth: Remaining plies
            maximizing: True when the opponent is to move
            alpha: Score the maximizer is already assured of
            beta: Score the minimizer is already assured of

        Returns:
            float: WIN_SCORE or -WIN_SCORE for a decided position, otherwise
            the best evaluation found
        """
        self.nodes += 1
        current = Piece.OPPONENT if maximizing else Piece.PLAYER

        # Wins are checked before the depth limit
        if board.has_four(Piece.OPPONENT):
            return WIN_SCORE
        if board.has_four(Piece.PLAYER):
            return -WIN_SCORE
        if depth == 0 or board.is_full():
            return self.evaluator.evaluate(board, current)

        best_score = -INF if maximizing else INF

        for col in range(board.cols):
            if board.available_row(col) is None:
                continue

            board.place(col, current)
            score = self.minimax(board, depth - 1, not maximizing, alpha, beta)
            board.undo(col)

            if maximizing:
                best_score = max(score, best_score)
                alpha = max(alpha, best_score)
            else:
                best_score = min(score, best_score)
                beta = min(beta, best_score)

            if beta <= alpha:
                break

        return best_score

    def ordered_columns(self, board: Board) -> List[int]:
        """Columns sorted by distance from the center, ties in natural order."""
        center = board.cols // 2
        return sorted(range(board.cols), key=lambda col: abs(col - center))

    def best_move(self, board: Board) -> Optional[int]:
        """
        Choose the opponent's column.

        A move that wins on the spot is taken immediately. Otherwise every
        available column is searched and the first one reaching the highest
        score wins, in center-first order.

        Args:
            board: Current position, left unchanged

        Returns:
            Optional[int]: The chosen column, or None if the board is full
        """
        self.nodes = 0
        start_time = time.time()
        candidates = [col for col in self.ordered_columns(board)
                      if board.available_row(col) is not None]

        for col in candidates:
            row = board.available_row(col)
            board.place(col, Piece.OPPONENT)
            wins = board.wins_at(row, col)
            board.undo(col)
            if wins:
                logger.info(f"Winning move in column {col}")
                return col

        best_col = None
        best_score = -INF

        for col in candidates:
            board.place(col, Piece.OPPONENT)
            score = self.minimax(board, self.max_depth, False, -INF, INF)
            board.undo(col)
            logger.debug(f"column {col} score {score}")

            if score > best_score:
                best_score = score
                best_col = col

        elapsed = time.time() - start_time
        logger.info(f"Best move {best_col} score {best_score} nodes {self.nodes} "
                    f"time {elapsed:.3f}s depth {self.max_depth}")
        return best_col
