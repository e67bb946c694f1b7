"""
Minimax move selection with optional alpha-beta pruning.

Scores are from the AI's perspective: the AI's turn maximizes, the
opponent's turn minimizes. Hypothetical moves are made on the board in
place and undone before the next one is tried, so a board handed to
best_move() comes back exactly as it went in.
"""

import math
from dataclasses import dataclass
from typing import Dict, Optional

from .board import BoardState, Outcome, Player, Position
from .errors import InvalidConfig, NoLegalMove

# Ply cap used when no depth is given; covers a whole 3x3 game.
DEFAULT_DEPTH = 9


@dataclass(frozen=True)
class ScorePolicy:
    """Terminal scores seen by the AI. Must satisfy win > draw > loss."""
    win: float = 1
    draw: float = 0
    loss: float = -1

    def __post_init__(self):
        if not (self.win > self.draw > self.loss):
            raise InvalidConfig(
                f"score policy needs win > draw > loss, got win={self.win}, draw={self.draw}, loss={self.loss}"
            )

    def table(self, ai_player) -> Dict[Outcome, float]:
        ai = Player.parse(ai_player)
        return {
            Outcome.for_winner(ai): self.win,
            Outcome.for_winner(ai.opponent): self.loss,
            Outcome.DRAW: self.draw,
        }


class SearchEngine:
    def __init__(self, ai_player, policy: Optional[ScorePolicy] = None,
                 depth: Optional[int] = None, use_alpha_beta: bool = True):
        self.ai_player = Player.parse(ai_player)
        self.policy = policy if policy is not None else ScorePolicy()
        if depth is not None and depth < 1:
            raise InvalidConfig(f"search depth must be >= 1, got {depth}")
        self.depth = depth
        self.use_alpha_beta = use_alpha_beta
        self.scores = self.policy.table(self.ai_player)
        self.nodes = 0  # search() calls made by the last root call

    def score_moves(self, board: BoardState) -> Dict[Position, float]:
        """Minimax score of every available move for the AI, row-major."""
        if board.evaluate() is not None:
            raise NoLegalMove("board is already decided; check evaluate() before asking for a move")
        depth = self.search_depth(board)
        self.nodes = 0
        scores = {}
        for move in board.available_positions():
            board.place(move, self.ai_player)
            # Full window per root move keeps root scores exact under pruning.
            scores[move] = self.search(board, depth - 1, False)
            board.clear(move)
        return scores

    def search_depth(self, board: BoardState) -> int:
        """Plies searched from board: the configured depth, else min(cells, DEFAULT_DEPTH)."""
        if self.depth is not None:
            return self.depth
        return min(board.size * board.size, DEFAULT_DEPTH)

    def best_move(self, board: BoardState) -> Position:
        """
        The available move with the highest score for the AI.

        Ties go to the first move in row-major order: max() keeps the first
        maximal key it sees.
        """
        scores = self.score_moves(board)
        return max(scores, key=scores.get)

    def search(self, board: BoardState, depth_remaining: int, maximizing: bool,
               alpha: float = -math.inf, beta: float = math.inf) -> float:
        self.nodes += 1

        outcome = board.evaluate()
        if outcome is not None:
            return self.scores[outcome]
        if depth_remaining <= 0:
            return self.policy.draw

        player = self.ai_player if maximizing else self.ai_player.opponent
        best = -math.inf if maximizing else math.inf
        for move in board.available_positions():
            board.place(move, player)
            score = self.search(board, depth_remaining - 1, not maximizing, alpha, beta)
            board.clear(move)
            if maximizing:
                if score > best:
                    best = score
                alpha = max(alpha, score)
            else:
                if score < best:
                    best = score
                beta = min(beta, score)
            if self.use_alpha_beta and alpha >= beta:
                break
        return best
