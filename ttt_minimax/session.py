"""
One game of TicTacToe between a human and the computer, or two humans.

A GameSession owns its board and turn; nothing is shared between sessions.
Display layers call play() with the human's squares, ai_move() when
is_ai_turn is true, and reset() to start another round.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import BoardState, Combination, Outcome, Player, Position
from .errors import IllegalMove, InvalidConfig, NoLegalMove
from .search import ScorePolicy, SearchEngine

MODES = ("ai", "human")


@dataclass
class SessionConfig:
    grid_size: int = 3
    human: Player = Player.X
    first: Player = Player.X
    mode: str = "ai"  # "ai": human vs computer, "human": two humans
    depth: Optional[int] = None
    use_alpha_beta: bool = True
    policy: ScorePolicy = field(default_factory=ScorePolicy)

    def validate(self) -> "SessionConfig":
        if self.mode not in MODES:
            raise InvalidConfig(f"mode must be one of {MODES}, got {self.mode!r}")
        self.human = Player.parse(self.human)
        self.first = Player.parse(self.first)
        if self.depth is not None and self.depth < 1:
            raise InvalidConfig(f"search depth must be >= 1, got {self.depth}")
        return self


class GameSession:
    def __init__(self, config: Optional[SessionConfig] = None):
        self.config = (config or SessionConfig()).validate()
        self.board = BoardState(self.config.grid_size)
        if self.config.mode == "ai":
            self.ai_player: Optional[Player] = self.config.human.opponent
            self.engine: Optional[SearchEngine] = SearchEngine(
                self.ai_player,
                policy=self.config.policy,
                depth=self.config.depth,
                use_alpha_beta=self.config.use_alpha_beta,
            )
        else:
            self.ai_player = None
            self.engine = None
        self.reset()

    def reset(self) -> None:
        """Start a new round: empty board, config.first to move."""
        self.board.reset()
        self.turn = self.config.first
        self.outcome: Optional[Outcome] = None
        self.history: List[Tuple[Player, Position]] = []

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    @property
    def winner(self) -> Optional[Player]:
        return None if self.outcome is None else self.outcome.winner

    @property
    def is_ai_turn(self) -> bool:
        return self.ai_player is not None and not self.is_over and self.turn == self.ai_player

    def winning_line(self) -> Optional[Combination]:
        return self.board.winning_line()

    def play(self, position: Position) -> Optional[Outcome]:
        """Place the mark of the player to move. Returns the new outcome."""
        if self.is_over:
            raise IllegalMove(f"the game is over ({self.outcome}); reset() to start a new round")
        self.board.place(position, self.turn)
        self.history.append((self.turn, (int(position[0]), int(position[1]))))
        self.outcome = self.board.evaluate()
        if self.outcome is None:
            self.turn = self.turn.opponent
        return self.outcome

    def ai_move(self) -> Position:
        """Let the computer choose and play its move."""
        if self.engine is None:
            raise IllegalMove("this session has no computer player")
        if self.is_over:
            raise NoLegalMove(f"the game is over ({self.outcome})")
        if self.turn != self.ai_player:
            raise IllegalMove(f"it is {self.turn.symbol}'s turn, not the computer's")
        move = self.engine.best_move(self.board)
        self.play(move)
        return move
