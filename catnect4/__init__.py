"""
Catnect4 Package

Connect-4 against a cat that plans its moves with minimax search and
alpha-beta pruning.
"""

from .board import Board, Piece, PlaceResult, ColumnOutOfRange, has_four
from .evaluation import Evaluator
from .search import MinimaxSearch
from .game import Connect4, GameState

__all__ = [
    'Board', 'Piece', 'PlaceResult', 'ColumnOutOfRange', 'has_four',
    'Evaluator', 'MinimaxSearch', 'Connect4', 'GameState',
]
__version__ = '1.0.0'
