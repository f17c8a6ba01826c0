#!/usr/bin/env python3
"""
Example usage of the Catnect4 engine.

This script demonstrates the board, the search engine and a short scripted
game against the cat, without reading from the console.
"""

import logging

from catnect4.board import Board, Piece
from catnect4.game import Connect4, GameState
from catnect4.search import MinimaxSearch


def example_board():
    """Demonstrate placing, querying and undoing pieces."""
    print("=== Board Basics ===")

    board = Board()
    board.place(3, Piece.OPPONENT)
    board.place(3, Piece.PLAYER)
    print(board)
    print(f"Next free row in column 3: {board.available_row(3)}")

    board.undo(3)
    print("After undoing the player's piece:")
    print(board)
    print("\n" + "=" * 50 + "\n")


def example_best_move():
    """Demonstrate the cat finishing an open three."""
    print("=== Finishing a Line ===")

    board = Board()
    for col in (1, 2, 3):
        board.place(col, Piece.OPPONENT)
    board.place(2, Piece.PLAYER)
    board.place(3, Piece.PLAYER)
    board.place(6, Piece.PLAYER)
    print(board)

    search = MinimaxSearch()
    col = search.best_move(board)
    print(f"Cat plays column {col}")
    board.place(col, Piece.OPPONENT)
    print(f"Four in a row: {board.has_four(Piece.OPPONENT)}")
    print("\n" + "=" * 50 + "\n")


def example_scripted_game():
    """Demonstrate a full game where the player always answers in column 0."""
    print("=== Scripted Game ===")

    game = Connect4()
    search = MinimaxSearch()

    while not game.is_game_over():
        if game.current_piece == Piece.OPPONENT:
            col = search.best_move(game.board)
            print(f"AI chooses column {col}")
        else:
            valid_moves = game.get_valid_moves()
            col = 0 if 0 in valid_moves else valid_moves[0]
            print(f"Player plays column {col}")
        game.make_move(col)

    print(game)
    print(f"Game result: {game.game_state.value}")
    if game.game_state != GameState.DRAW:
        print(f"Winner: {game.get_winner().name}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    example_board()
    example_best_move()
    example_scripted_game()
