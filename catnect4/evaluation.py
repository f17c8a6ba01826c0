"""
Static evaluation of Connect-4 positions.
"""

from .board import Board, Piece
from .config import WIN_SCORE


class Evaluator:
    """
    Scores a position from one side's point of view.

    Only completed lines are scored: WIN_SCORE when ``piece`` has four in a
    row, -WIN_SCORE when the other side does. Everything else is left to
    ``heuristic``, which subclasses may override to shape play at the leaves.
    """

    def evaluate(self, board: Board, piece: Piece) -> int:
        score = 0

        if board.has_four(piece):
            score += WIN_SCORE

        if board.has_four(piece.other):
            score -= WIN_SCORE

        return score + self.heuristic(board, piece)

    def heuristic(self, board: Board, piece: Piece) -> int:
        return 0
