"""
Console match between a human and the cat.

Rounds are played until the human declines a rematch. The opponent opens
every round and the running score is kept across rounds.
"""

import logging
import random
from typing import Callable, Optional

from .board import Piece
from .config import GameConfig
from .game import Connect4, GameState
from .players import Commentator, HumanPlayer, MinimaxPlayer, render_board

logger = logging.getLogger(__name__)


def setup_logging(config: GameConfig) -> None:
    """Configure the root logger from the game configuration."""
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


class Match:
    """
    A series of rounds with running win tallies.

    Attributes:
        game (Connect4): The round in play, reset between rounds
        player_wins (int): Rounds won by the human
        ai_wins (int): Rounds won by the opponent
        draws (int): Rounds that filled the board
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 human: Optional[HumanPlayer] = None,
                 ai: Optional[MinimaxPlayer] = None,
                 rng: Optional[random.Random] = None,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.config = config or GameConfig()
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.human = human or HumanPlayer(input_fn=input_fn, output_fn=output_fn)
        self.ai = ai or MinimaxPlayer(depth=self.config.max_depth)
        self.commentator = Commentator(self.config.comments, rng)

        first = Piece.OPPONENT if self.config.opponent_starts else Piece.PLAYER
        self.game = Connect4(self.config.rows, self.config.cols, first_piece=first)

        self.player_wins = 0
        self.ai_wins = 0
        self.draws = 0

    def show_board(self) -> None:
        self.output_fn(render_board(
            self.game.board,
            self.config.player_marker,
            self.config.opponent_marker,
            self.config.empty_marker,
            self.config.use_color,
        ))

    def play_turn(self) -> None:
        """Play one move for the side to move, re-prompting the human on refusal."""
        if self.game.current_piece == Piece.OPPONENT:
            col = self.ai.get_move(self.game)
            if col is None or not self.game.make_move(col):
                raise ValueError(f"Invalid move {col} by {self.ai.name}")
            self.output_fn(f"AI chooses column {col}")
            self.output_fn(self.commentator.comment())
            return

        while True:
            col = self.human.get_move(self.game)
            if self.game.make_move(col):
                return
            self.output_fn("Invalid move. Try again.")

    def play_round(self) -> GameState:
        """
        Play a round from an empty board to its end.

        Returns:
            GameState: How the round ended
        """
        self.game.reset()

        while not self.game.is_game_over():
            self.show_board()
            self.play_turn()

        self.show_board()
        if self.game.game_state == GameState.OPPONENT_WINS:
            self.output_fn("AI wins!")
        elif self.game.game_state == GameState.PLAYER_WINS:
            self.output_fn("Player wins!")
        else:
            self.output_fn("It's a draw!")

        self.record(self.game.game_state)
        return self.game.game_state

    def record(self, result: GameState) -> None:
        """Add a finished round to the tallies."""
        if result == GameState.PLAYER_WINS:
            self.player_wins += 1
        elif result == GameState.OPPONENT_WINS:
            self.ai_wins += 1
        elif result == GameState.DRAW:
            self.draws += 1
        else:
            raise ValueError("Cannot record a round still in progress")
        logger.info(f"Round over: {result.value} "
                    f"(player {self.player_wins}, AI {self.ai_wins}, draws {self.draws})")

    def ask_replay(self) -> bool:
        """Anything but an explicit no starts another round."""
        answer = self.input_fn("Play again? (y/n): ")
        return answer.strip()[:1] not in ('n', 'N')

    def run(self) -> None:
        while True:
            self.play_round()
            self.output_fn(f"Score - Player: {self.player_wins}, AI: {self.ai_wins}")
            if not self.ask_replay():
                break


def main() -> None:
    """Console entry point."""
    config = GameConfig()
    setup_logging(config)

    match = Match(config)
    try:
        match.run()
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted by user.")


if __name__ == "__main__":
    main()
