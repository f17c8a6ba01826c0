"""
Connect-4 Board State

The board is a fixed grid of cells stored in a numpy array. Row 0 is the
bottom row, so pieces fill every column from row 0 upwards. The search
engine mutates the board in place through speculative place/undo pairs,
and every mutation here can be undone exactly.
"""

from typing import List, Optional
from enum import Enum, IntEnum
import numpy as np
from numba import jit

from .config import ROWS, COLS

RED = "\033[31m"
YELLOW = "\033[33m"
RESET = "\033[0m"


class Piece(IntEnum):
    """Cell contents."""
    EMPTY = 0
    PLAYER = 1
    OPPONENT = 2

    @property
    def other(self) -> 'Piece':
        """The opposing side's piece."""
        if self is Piece.EMPTY:
            raise ValueError("EMPTY has no opposing piece")
        return Piece.OPPONENT if self is Piece.PLAYER else Piece.PLAYER


class PlaceResult(Enum):
    """Outcome of a placement attempt."""
    SUCCESS = "success"
    COLUMN_OUT_OF_RANGE = "column_out_of_range"
    COLUMN_FULL = "column_full"

    def __bool__(self) -> bool:
        return self is PlaceResult.SUCCESS


class ColumnOutOfRange(ValueError):
    """Raised when a query names a column outside the board."""

    def __init__(self, column: int, cols: int):
        super().__init__(f"Column {column} out of range [0, {cols})")
        self.column = column
        self.cols = cols


# JIT-compiled board kernels
@jit(nopython=True, cache=True)
def _jit_has_four(grid: np.ndarray, piece: int, rows: int, cols: int) -> bool:
    """
    JIT-compiled scan for four in a row anywhere on the board.

    Every cell holding ``piece`` is treated as the start of a line which is
    extended three steps in each of the four directions.

    Args:
        grid: The board as numpy array, row 0 at the bottom
        piece: Value of the piece to look for (1 or 2)
        rows: Number of rows in the board
        cols: Number of columns in the board

    Returns:
        bool: True if ``piece`` has four in a row
    """
    for row in range(rows):
        for col in range(cols):
            if grid[row, col] != piece:
                continue
            # Horizontal
            if (col + 3 < cols and
                    grid[row, col + 1] == piece and
                    grid[row, col + 2] == piece and
                    grid[row, col + 3] == piece):
                return True
            # Vertical
            if (row + 3 < rows and
                    grid[row + 1, col] == piece and
                    grid[row + 2, col] == piece and
                    grid[row + 3, col] == piece):
                return True
            # Diagonal (up-right)
            if (row + 3 < rows and col + 3 < cols and
                    grid[row + 1, col + 1] == piece and
                    grid[row + 2, col + 2] == piece and
                    grid[row + 3, col + 3] == piece):
                return True
            # Diagonal (up-left)
            if (row + 3 < rows and col - 3 >= 0 and
                    grid[row + 1, col - 1] == piece and
                    grid[row + 2, col - 2] == piece and
                    grid[row + 3, col - 3] == piece):
                return True
    return False


@jit(nopython=True, cache=True)
def _jit_wins_at(grid: np.ndarray, row: int, col: int, rows: int, cols: int) -> bool:
    """
    JIT-compiled check for four in a row through a single cell.

    Args:
        grid: The board as numpy array
        row: Row of the placed piece
        col: Column of the placed piece
        rows: Number of rows in the board
        cols: Number of columns in the board

    Returns:
        bool: True if the piece at (row, col) is part of four in a row
    """
    piece = grid[row, col]
    if piece == 0:
        return False
    for dr, dc in ((0, 1), (1, 0), (1, 1), (1, -1)):
        count = 1  # Count the piece itself

        # Check in positive direction
        r, c = row + dr, col + dc
        while 0 <= r < rows and 0 <= c < cols and grid[r, c] == piece:
            count += 1
            r, c = r + dr, c + dc

        # Check in negative direction
        r, c = row - dr, col - dc
        while 0 <= r < rows and 0 <= c < cols and grid[r, c] == piece:
            count += 1
            r, c = r - dr, c - dc

        if count >= 4:
            return True

    return False


@jit(nopython=True, cache=True)
def _jit_available_row(grid: np.ndarray, col: int, rows: int) -> int:
    """Lowest empty row in ``col``, or -1 if the column is full."""
    for row in range(rows):
        if grid[row, col] == 0:
            return row
    return -1


def has_four(grid: np.ndarray, piece: Piece) -> bool:
    """Check whether ``piece`` has four in a row on ``grid``."""
    rows, cols = grid.shape
    return bool(_jit_has_four(grid, int(piece), rows, cols))


class Board:
    """
    Connect-4 board with gravity.

    The grid is a numpy array where:
    - 0 represents an empty cell
    - 1 represents the human player's piece
    - 2 represents the automated opponent's piece

    Attributes:
        rows (int): Number of rows in the board
        cols (int): Number of columns in the board
        grid (np.ndarray): The cells, ``grid[0]`` is the bottom row
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """
        Create an empty board.

        Raises:
            ValueError: If the board cannot hold a line of four
        """
        if rows < 1 or cols < 1:
            raise ValueError("Board dimensions must be at least 1x1")
        if max(rows, cols) < 4:
            raise ValueError("Board must be able to hold four in a row")

        self.rows = rows
        self.cols = cols
        self.grid = np.zeros((rows, cols), dtype=np.int8)

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self.cols:
            raise ColumnOutOfRange(column, self.cols)

    def available_row(self, column: int) -> Optional[int]:
        """
        Lowest empty row in a column.

        Args:
            column (int): Column index (0-based)

        Returns:
            Optional[int]: The row a piece dropped here would land on, or
            None if the column is full

        Raises:
            ColumnOutOfRange: If ``column`` is not on the board
        """
        self._check_column(column)
        row = _jit_available_row(self.grid, column, self.rows)
        return None if row == -1 else int(row)

    def place(self, column: int, piece: Piece) -> PlaceResult:
        """
        Drop a piece into a column.

        Args:
            column (int): Column index (0-based)
            piece (Piece): PLAYER or OPPONENT

        Returns:
            PlaceResult: SUCCESS, or the reason the piece was not placed
        """
        if piece == Piece.EMPTY:
            raise ValueError("Cannot place an EMPTY piece")
        if not 0 <= column < self.cols:
            return PlaceResult.COLUMN_OUT_OF_RANGE

        row = self.available_row(column)
        if row is None:
            return PlaceResult.COLUMN_FULL

        self.grid[row, column] = piece
        return PlaceResult.SUCCESS

    def undo(self, column: int) -> None:
        """
        Remove the topmost piece of a column.

        Raises:
            ValueError: If the column holds no piece
        """
        row = self.available_row(column)
        top = self.rows - 1 if row is None else row - 1
        if top < 0:
            raise ValueError(f"Column {column} is empty, nothing to undo")
        self.grid[top, column] = Piece.EMPTY

    def is_column_full(self, column: int) -> bool:
        """Gravity fills columns bottom-up, so only the top cell matters."""
        self._check_column(column)
        return bool(self.grid[self.rows - 1, column] != Piece.EMPTY)

    def is_full(self) -> bool:
        """True when no column can take another piece."""
        return bool(np.all(self.grid[self.rows - 1] != Piece.EMPTY))

    def valid_moves(self) -> List[int]:
        """Columns that can take another piece, in natural order."""
        top = self.grid[self.rows - 1]
        return [col for col in range(self.cols) if top[col] == Piece.EMPTY]

    def has_four(self, piece: Piece) -> bool:
        """Check whether ``piece`` has four in a row anywhere on the board."""
        return has_four(self.grid, piece)

    def wins_at(self, row: int, column: int) -> bool:
        """Check whether the piece at (row, column) completes four in a row."""
        return bool(_jit_wins_at(self.grid, row, column, self.rows, self.cols))

    def piece_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def reset(self) -> None:
        """Clear every cell."""
        self.grid.fill(Piece.EMPTY)

    def copy(self) -> 'Board':
        clone = Board(self.rows, self.cols)
        clone.grid = self.grid.copy()
        return clone

    def get_board(self) -> List[List[int]]:
        """
        Get a copy of the cells, bottom row first.

        Returns:
            List[List[int]]: A copy of the grid
        """
        return self.grid.tolist()

    def __getitem__(self, index):
        return self.grid[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    def render(self, player_marker: str = 'X', opponent_marker: str = 'O',
               empty_marker: str = '.', color: bool = False) -> str:
        """
        Text representation of the board, top row first.

        Args:
            player_marker: Marker for the human player's pieces
            opponent_marker: Marker for the opponent's pieces
            empty_marker: Marker for empty cells
            color: Wrap pieces in ANSI colours (red player, yellow opponent)

        Returns:
            str: The rendered grid with column numbers underneath
        """
        separator = "+" + "---+" * self.cols
        result = [separator]

        for row in range(self.rows - 1, -1, -1):
            row_str = "|"
            for cell in self.grid[row]:
                if cell == Piece.PLAYER:
                    text = f" {player_marker} "
                    if color:
                        text = RED + text + RESET
                elif cell == Piece.OPPONENT:
                    text = f" {opponent_marker} "
                    if color:
                        text = YELLOW + text + RESET
                else:
                    text = f" {empty_marker} "
                row_str += text + "|"
            result.append(row_str)
            result.append(separator)

        result.append(" " + "".join(f" {col % 10} " for col in range(self.cols)))
        return "\n".join(result)

    def __str__(self) -> str:
        return self.render()
