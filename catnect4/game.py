"""
Connect-4 Game State

Wraps a Board with turn order and the outcome of the round. The human
player drops ``Piece.PLAYER`` and the automated opponent ``Piece.OPPONENT``.
"""

import logging
from typing import List, Optional
from enum import Enum

from .board import Board, Piece, PlaceResult
from .config import ROWS, COLS

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Enumeration for game states."""
    IN_PROGRESS = "in_progress"
    PLAYER_WINS = "player_wins"
    OPPONENT_WINS = "opponent_wins"
    DRAW = "draw"


class Connect4:
    """
    One round of Connect-4 between the human player and the opponent.

    Attributes:
        board (Board): The grid, shared with the search engine
        current_piece (Piece): The side to move
        game_state (GameState): Current state of the game
        first_piece (Piece): The side that opens every round
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS,
                 first_piece: Piece = Piece.OPPONENT):
        if first_piece == Piece.EMPTY:
            raise ValueError("The first move must belong to a side")
        self.board = Board(rows, cols)
        self.first_piece = first_piece
        self.current_piece = first_piece
        self.game_state = GameState.IN_PROGRESS

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    def get_valid_moves(self) -> List[int]:
        """
        Get all valid column indices where a piece can be dropped.

        Returns:
            List[int]: List of valid column indices (0-based), empty once
            the game is over
        """
        if self.game_state != GameState.IN_PROGRESS:
            return []
        return self.board.valid_moves()

    def make_move(self, col: int) -> PlaceResult:
        """
        Drop the current side's piece into a column.

        Args:
            col (int): Column index (0-based)

        Returns:
            PlaceResult: SUCCESS, or the reason the move was refused. A move
            after the game has ended is refused as COLUMN_FULL.
        """
        if self.game_state != GameState.IN_PROGRESS:
            return PlaceResult.COLUMN_FULL

        result = self.board.place(col, self.current_piece)
        if not result:
            logger.debug(f"{self.current_piece.name} move {col} refused: {result.value}")
            return result

        # The piece just landed on top of its column
        row = self.board.available_row(col)
        row = self.rows - 1 if row is None else row - 1
        logger.info(f"{self.current_piece.name} plays column {col}")

        self._update_game_state(row, col)

        # Switch sides if game is still in progress
        if self.game_state == GameState.IN_PROGRESS:
            self.current_piece = self.current_piece.other

        return result

    def _update_game_state(self, last_row: int, last_col: int) -> None:
        """
        Update the game state after a move.

        Args:
            last_row (int): Row of the last placed piece
            last_col (int): Column of the last placed piece
        """
        if self.board.wins_at(last_row, last_col):
            if self.current_piece == Piece.PLAYER:
                self.game_state = GameState.PLAYER_WINS
            else:
                self.game_state = GameState.OPPONENT_WINS
            return

        if self.board.is_full():
            self.game_state = GameState.DRAW

    def get_winner(self) -> Optional[Piece]:
        """
        Get the winner of the game.

        Returns:
            Optional[Piece]: The winning side, or None if no winner yet
        """
        if self.game_state == GameState.PLAYER_WINS:
            return Piece.PLAYER
        elif self.game_state == GameState.OPPONENT_WINS:
            return Piece.OPPONENT
        return None

    def is_game_over(self) -> bool:
        return self.game_state != GameState.IN_PROGRESS

    def reset(self) -> None:
        """Clear the board and hand the first move back to the opening side."""
        self.board.reset()
        self.current_piece = self.first_piece
        self.game_state = GameState.IN_PROGRESS

    def __str__(self) -> str:
        """
        String representation of the game.

        Returns:
            str: The board followed by the turn or the result
        """
        result = [str(self.board)]

        if self.game_state == GameState.IN_PROGRESS:
            result.append(f"Current player: {self.current_piece.name}")
        elif self.game_state == GameState.DRAW:
            result.append("It's a draw!")
        elif self.game_state == GameState.PLAYER_WINS:
            result.append("Player wins!")
        else:
            result.append("AI wins!")

        return "\n".join(result)
