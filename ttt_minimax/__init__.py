"""
N×N TicTacToe with a minimax (alpha-beta) computer opponent.

BoardState holds the grid and answers win/draw queries, SearchEngine picks
moves, GameSession runs a round between a human and the AI or two humans.
"""

from .errors import TicTacToeError, InvalidConfig, IllegalMove, NoLegalMove
from .board import EMPTY, BoardState, Outcome, Player, winning_combinations
from .search import ScorePolicy, SearchEngine
from .session import GameSession, SessionConfig

__version__ = "0.1.0"
__all__ = [
    "TicTacToeError",
    "InvalidConfig",
    "IllegalMove",
    "NoLegalMove",
    "EMPTY",
    "BoardState",
    "Outcome",
    "Player",
    "winning_combinations",
    "ScorePolicy",
    "SearchEngine",
    "GameSession",
    "SessionConfig",
]
