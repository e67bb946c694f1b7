"""
Generalized N×N TicTacToe board.

Board representation: flat numpy int8 array of length N*N
  - 0: empty
  - +1: X
  - -1: O

Position (row, col) is stored at index row * N + col. A player wins by
filling one full row, one full column, or one of the two long diagonals.
"""

import functools
from enum import Enum, IntEnum
from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import IllegalMove, InvalidConfig

Position = Tuple[int, int]
Combination = Tuple[Position, ...]

EMPTY = 0
_EMPTY_CHARS = ".-_ "


class Player(IntEnum):
    X = 1
    O = -1

    @property
    def opponent(self) -> "Player":
        return Player(-self.value)

    @property
    def symbol(self) -> str:
        return self.name

    @classmethod
    def parse(cls, value) -> "Player":
        """Accept a Player, +1/-1, or 'X'/'O' in either case."""
        if isinstance(value, Player):
            return value
        if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                raise InvalidConfig(f"{value!r} is not a player value (expected +1 or -1)") from None
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise InvalidConfig(f"unknown player {value!r}, expected 'X' or 'O'") from None


class Outcome(Enum):
    X_WINS = "X"
    O_WINS = "O"
    DRAW = "Draw"

    @classmethod
    def for_winner(cls, player: Player) -> "Outcome":
        return cls.X_WINS if Player(player) == Player.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Player]:
        if self is Outcome.DRAW:
            return None
        return Player[self.value]

    def __str__(self) -> str:
        return "Draw" if self is Outcome.DRAW else f"{self.value} wins"


def _check_size(grid_size) -> int:
    if isinstance(grid_size, bool) or not isinstance(grid_size, (int, np.integer)):
        raise InvalidConfig(f"grid size must be an integer, got {grid_size!r}")
    if grid_size < 1:
        raise InvalidConfig(f"grid size must be >= 1, got {grid_size}")
    return int(grid_size)


@functools.lru_cache(maxsize=None)
def winning_combinations(grid_size: int) -> Tuple[Combination, ...]:
    """
    All lines that win the game on a grid_size × grid_size board.

    Ordered as row i, column i for every i, then the main diagonal and the
    anti-diagonal: 2 * grid_size + 2 lines of grid_size positions each.
    """
    n = _check_size(grid_size)
    combos = []
    for i in range(n):
        combos.append(tuple((i, j) for j in range(n)))
        combos.append(tuple((j, i) for j in range(n)))
    combos.append(tuple((i, i) for i in range(n)))
    combos.append(tuple((i, n - 1 - i) for i in range(n)))
    return tuple(combos)


@functools.lru_cache(maxsize=None)
def combination_indices(grid_size: int) -> np.ndarray:
    """Flat-index form of winning_combinations(), shape (2N+2, N)."""
    n = _check_size(grid_size)
    idx = np.array([[r * n + c for r, c in combo] for combo in winning_combinations(n)], dtype=np.intp)
    idx.setflags(write=False)
    return idx


class BoardState:
    def __init__(self, grid_size: int = 3):
        self.initialize(grid_size)

    def initialize(self, grid_size: int) -> None:
        """Make an empty grid_size × grid_size board."""
        self.size = _check_size(grid_size)
        self.cells = np.zeros(self.size * self.size, dtype=np.int8)

    def reset(self) -> None:
        self.cells[:] = EMPTY

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "BoardState":
        """
        Build a board from row strings, e.g. ["XX.", ".O.", "..O"].

        '.', '-', '_' and ' ' mark empty cells.
        """
        rows = list(rows)
        board = cls(len(rows))
        for r, line in enumerate(rows):
            if len(line) != board.size:
                raise InvalidConfig(f"row {r} has {len(line)} cells, expected {board.size}")
            for c, ch in enumerate(line):
                if ch in _EMPTY_CHARS:
                    continue
                board.place((r, c), Player.parse(ch))
        return board

    @property
    def combinations(self) -> Tuple[Combination, ...]:
        return winning_combinations(self.size)

    # ---------- cell access ----------
    def index(self, position: Position) -> int:
        try:
            r, c = position
        except (TypeError, ValueError):
            raise IllegalMove(f"not a (row, col) pair: {position!r}") from None
        if not all(isinstance(v, (int, np.integer)) and not isinstance(v, bool) for v in (r, c)):
            raise IllegalMove(f"row and col must be integers, got {position!r}")
        n = self.size
        if not (0 <= r < n and 0 <= c < n):
            raise IllegalMove(f"position {(r, c)} is outside the {n}x{n} board")
        return int(r) * n + int(c)

    def get(self, position: Position) -> Optional[Player]:
        v = int(self.cells[self.index(position)])
        return None if v == EMPTY else Player(v)

    def place(self, position: Position, player) -> None:
        """Put player's mark on an empty cell."""
        try:
            mark = Player.parse(player)
        except InvalidConfig as e:
            raise IllegalMove(str(e)) from None
        i = self.index(position)
        if self.cells[i] != EMPTY:
            taken_by = Player(int(self.cells[i])).symbol
            raise IllegalMove(f"cell {tuple(position)} is already taken by {taken_by}")
        self.cells[i] = mark

    def clear(self, position: Position) -> None:
        """Set a cell back to empty (undo of place)."""
        self.cells[self.index(position)] = EMPTY

    def available_positions(self):
        """Empty cells as (row, col), row-major."""
        n = self.size
        return [divmod(int(i), n) for i in np.flatnonzero(self.cells == EMPTY)]

    def is_full(self) -> bool:
        return not bool((self.cells == EMPTY).any())

    @property
    def move_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    # ---------- outcome ----------
    def _first_win(self, combinations=None) -> Tuple[Optional[int], Optional[Player]]:
        n = self.size
        if combinations is None:
            idx = combination_indices(n)
        else:
            idx = np.array([[self.index(p) for p in combo] for combo in combinations], dtype=np.intp)
            if idx.size == 0:
                return None, None
        sums = self.cells[idx].sum(axis=1)
        lengths = idx.shape[1]
        hits = np.flatnonzero(np.abs(sums) == lengths)
        if hits.size == 0:
            return None, None
        k = int(hits[0])
        return k, (Player.X if sums[k] > 0 else Player.O)

    def evaluate(self, combinations=None) -> Optional[Outcome]:
        """
        Outcome of the current position, or None while the game continues.

        A completed line is checked before fullness, so a full board that
        contains a line is a win and never a draw.
        """
        _, winner = self._first_win(combinations)
        if winner is not None:
            return Outcome.for_winner(winner)
        if self.is_full():
            return Outcome.DRAW
        return None

    def winning_line(self) -> Optional[Combination]:
        k, _ = self._first_win()
        return None if k is None else self.combinations[k]

    # ---------- views ----------
    def grid(self) -> np.ndarray:
        return self.cells.reshape(self.size, self.size)

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self.cells.tolist())

    def copy(self) -> "BoardState":
        new = BoardState(self.size)
        new.cells = self.cells.copy()
        return new

    def render(self) -> str:
        symbols = {1: 'X', -1: 'O', EMPTY: '_'}
        return "\n".join(" ".join(symbols[v] for v in row) for row in self.grid().tolist())

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.cells, other.cells))

    __hash__ = None

    def __repr__(self) -> str:
        rows = ["".join({1: 'X', -1: 'O', EMPTY: '.'}[v] for v in row) for row in self.grid().tolist()]
        return f"BoardState.from_rows({rows!r})"
