"""
Game configuration for Catnect4.

Holds the fixed board dimensions, the search depth of the automated
opponent and the console settings used by the match loop.
"""

from typing import List, Optional

ROWS = 6
COLS = 7
MAX_DEPTH = 4  # Plies searched after each candidate move
WIN_SCORE = 1000

AI_COMMENTS = [
    "Meow! I'm making a purrfect move!",
    "Paws and think... Done!",
    "This will be a claw-some win!",
    "Let's see if you can handle my feline finesse!",
    "I'm pouncing on this move!",
    "My whiskers are twitching for victory!",
    "Watch out! Here comes the cat's paw!",
]


class GameConfig:
    """Configuration for a console match against the cat."""

    def __init__(self):
        # Board
        self.rows = ROWS
        self.cols = COLS

        # Search
        self.max_depth = MAX_DEPTH

        # Rendering
        self.player_marker = 'X'
        self.opponent_marker = 'O'
        self.empty_marker = '.'
        self.use_color = True

        # Match
        self.opponent_starts = True
        self.comments: List[str] = list(AI_COMMENTS)

        # Logging
        self.log_level = 'WARNING'
        self.log_file: Optional[str] = None
