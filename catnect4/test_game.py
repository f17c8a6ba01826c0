"""
Test suite for the game state machine, the players and the console match.
"""

import random

import pytest
from catnect4.board import Piece, PlaceResult
from catnect4.config import GameConfig, AI_COMMENTS
from catnect4.game import Connect4, GameState
from catnect4.players import Commentator, HumanPlayer, MinimaxPlayer
from catnect4.play import Match


class ScriptedPlayer:
    """Plays a fixed list of columns."""

    def __init__(self, moves, name="AI"):
        self.moves = list(moves)
        self.name = name

    def get_move(self, game_state):
        return self.moves.pop(0)


def scripted_input(answers):
    answers = iter(answers)
    prompts = []

    def input_fn(prompt):
        prompts.append(prompt)
        return next(answers)

    return input_fn, prompts


class TestConnect4:
    """Test turn order and game state transitions."""

    def test_opponent_moves_first(self):
        game = Connect4()
        assert game.current_piece == Piece.OPPONENT
        assert game.make_move(3) is PlaceResult.SUCCESS
        assert game.board[0, 3] == Piece.OPPONENT
        assert game.current_piece == Piece.PLAYER

    def test_refused_move_keeps_turn(self):
        game = Connect4()
        assert game.make_move(9) is PlaceResult.COLUMN_OUT_OF_RANGE
        assert game.current_piece == Piece.OPPONENT

        for _ in range(6):
            game.make_move(0)
        assert game.make_move(0) is PlaceResult.COLUMN_FULL
        assert game.current_piece == Piece.OPPONENT

    def test_opponent_vertical_win(self):
        game = Connect4()
        for col in (3, 0, 3, 1, 3, 2, 3):
            game.make_move(col)

        assert game.game_state == GameState.OPPONENT_WINS
        assert game.get_winner() == Piece.OPPONENT
        assert game.is_game_over() is True
        assert game.get_valid_moves() == []
        assert "AI wins!" in str(game)

    def test_player_horizontal_win(self):
        game = Connect4()
        for col in (6, 0, 6, 1, 5, 2, 5, 3):
            game.make_move(col)

        assert game.game_state == GameState.PLAYER_WINS
        assert game.get_winner() == Piece.PLAYER

    def test_no_moves_after_game_over(self):
        game = Connect4()
        for col in (3, 0, 3, 1, 3, 2, 3):
            game.make_move(col)
        assert not game.make_move(4)
        assert game.board[0, 4] == Piece.EMPTY

    def test_draw(self):
        """Test draw detection when the board fills up."""
        game = Connect4(first_piece=Piece.PLAYER)
        base = [Piece.PLAYER, Piece.PLAYER, Piece.OPPONENT, Piece.OPPONENT,
                Piece.PLAYER, Piece.PLAYER, Piece.OPPONENT]
        for row in range(game.rows):
            for col in range(game.cols):
                piece = base[col]
                game.board.place(col, piece.other if row % 2 else piece)
        game.board.undo(6)

        # The top-right cell belongs to the player in this layout
        game.current_piece = Piece.PLAYER
        assert game.make_move(6)
        assert game.game_state == GameState.DRAW
        assert game.get_winner() is None
        assert "It's a draw!" in str(game)

    def test_reset(self):
        game = Connect4()
        game.make_move(0)
        game.make_move(1)
        game.reset()

        assert game.current_piece == Piece.OPPONENT
        assert game.game_state == GameState.IN_PROGRESS
        assert game.board.piece_count() == 0

    def test_empty_first_piece_rejected(self):
        with pytest.raises(ValueError):
            Connect4(first_piece=Piece.EMPTY)


class TestPlayers:
    """Test the human and automated players."""

    def test_human_reads_integer(self):
        input_fn, prompts = scripted_input([" 4 "])
        player = HumanPlayer(input_fn=input_fn, output_fn=lambda text: None)
        assert player.get_move(Connect4()) == 4
        assert prompts == ["Player, enter your column (0-6): "]

    def test_human_retries_non_numeric(self):
        input_fn, prompts = scripted_input(["cat", "", "2"])
        output = []
        player = HumanPlayer(input_fn=input_fn, output_fn=output.append)
        assert player.get_move(Connect4()) == 2
        assert len(prompts) == 3
        assert output == ["Please enter a valid integer."] * 2

    def test_minimax_player_opens_center(self):
        assert MinimaxPlayer().get_move(Connect4()) == 3

    def test_commentator_is_reproducible(self):
        first = Commentator(rng=random.Random(5))
        second = Commentator(rng=random.Random(5))
        remarks = [first.comment() for _ in range(10)]
        assert remarks == [second.comment() for _ in range(10)]
        assert all(remark in AI_COMMENTS for remark in remarks)

    def test_commentator_needs_comments(self):
        with pytest.raises(ValueError):
            Commentator(comments=[])


class TestMatch:
    """Test the console match loop."""

    def make_match(self, answers, ai_moves):
        input_fn, prompts = scripted_input(answers)
        output = []
        config = GameConfig()
        config.use_color = False
        match = Match(config, ai=ScriptedPlayer(ai_moves), rng=random.Random(0),
                      input_fn=input_fn, output_fn=output.append)
        return match, output, prompts

    def test_single_round_ai_wins(self):
        match, output, prompts = self.make_match(["0", "1", "2", "n"], [3, 3, 3, 3])
        match.run()

        assert match.ai_wins == 1
        assert match.player_wins == 0
        assert "AI chooses column 3" in output
        assert "AI wins!" in output
        assert "Score - Player: 0, AI: 1" in output
        assert prompts[-1] == "Play again? (y/n): "

    def test_invalid_column_is_retried(self):
        match, output, prompts = self.make_match(["abc", "9", "0", "1", "2", "N"], [3, 3, 3, 3])
        match.run()

        assert "Please enter a valid integer." in output
        assert output.count("Invalid move. Try again.") == 1
        assert match.game.board[0, 0] == Piece.PLAYER

    def test_replay_keeps_tallies(self):
        answers = ["0", "1", "2", "y",
                   "3", "3", "3", "3", "no"]
        ai_moves = [3, 3, 3, 3,
                    0, 1, 2, 6]
        match, output, prompts = self.make_match(answers, ai_moves)
        match.run()

        # Second round: opponent opens again, player stacks column 3 and wins vertically
        assert match.ai_wins == 1
        assert match.player_wins == 1
        assert "Player wins!" in output
        assert "Score - Player: 1, AI: 1" in output

    def test_anything_but_no_replays(self):
        match, _, _ = self.make_match(["maybe"], [])
        assert match.ask_replay() is True

    def test_record_rejects_unfinished_round(self):
        match, _, _ = self.make_match([], [])
        with pytest.raises(ValueError):
            match.record(GameState.IN_PROGRESS)

    def test_illegal_ai_move_raises(self):
        match, _, _ = self.make_match([], [7])
        with pytest.raises(ValueError):
            match.play_turn()

    def test_comment_after_each_ai_move(self):
        match, output, _ = self.make_match(["0", "1", "2", "n"], [3, 3, 3, 3])
        match.run()
        remarks = [line for line in output if line in AI_COMMENTS]
        assert len(remarks) == 4
