"""Move sources for the terminal game: a human at the keyboard and the minimax AI."""

from typing import Callable, Dict, Optional, Tuple

from .board import BoardState, Player, Position
from .errors import InvalidConfig
from .search import ScorePolicy, SearchEngine


class MinimaxPlayer:
    def __init__(self, letter, engine: Optional[SearchEngine] = None,
                 policy: Optional[ScorePolicy] = None, depth: Optional[int] = None,
                 use_alpha_beta: bool = True, verbose: bool = False):
        self.letter = Player.parse(letter)
        if engine is None:
            engine = SearchEngine(self.letter, policy=policy, depth=depth, use_alpha_beta=use_alpha_beta)
        elif engine.ai_player != self.letter:
            raise InvalidConfig(f"engine plays {engine.ai_player.symbol}, player is {self.letter.symbol}")
        self.engine = engine
        self.verbose = verbose

    def get_move(self, board: BoardState) -> Position:
        move, _ = self.get_move_with_scores(board)
        return move

    def get_move_with_scores(self, board: BoardState) -> Tuple[Position, Dict[Position, float]]:
        scores = self.engine.score_moves(board)
        # first maximal move wins ties, same as SearchEngine.best_move
        move = max(scores, key=scores.get)
        if self.verbose:
            print(f"AI ({self.letter.symbol}) chooses move: {move} with score: {scores[move]} "
                  f"({self.engine.nodes} positions searched)")
        return move, scores


class HumanPlayer:
    def __init__(self, letter, input_fn: Optional[Callable[[str], str]] = None):
        self.letter = Player.parse(letter)
        self.input_fn = input_fn or input

    def get_move(self, board: BoardState) -> Position:
        available = set(board.available_positions())
        while True:
            square_str = self.input_fn(f"{self.letter.symbol}'s turn. Input move (row col): ")
            try:
                # "0 1" -> (0, 1)
                row, col = [int(s) for s in square_str.split()]
            except ValueError:
                print('Invalid input format. Please use "row col" (e.g., "0 2").')
                continue
            if (row, col) in available:
                return (row, col)
            print('Invalid square. Try again.')
