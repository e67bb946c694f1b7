import matplotlib

matplotlib.use("Agg")

import pytest

from ttt_minimax.board import BoardState, Player


def _reachable(size=3, first=Player.X):
    """Every position reachable from the empty board, with the side to move."""
    start = BoardState(size)
    seen = {start.snapshot(): (start, first)}
    frontier = [(start, first)]
    while frontier:
        board, turn = frontier.pop()
        if board.evaluate() is not None:
            continue
        for move in board.available_positions():
            child = board.copy()
            child.place(move, turn)
            key = child.snapshot()
            if key not in seen:
                seen[key] = (child, turn.opponent)
                frontier.append((child, turn.opponent))
    return list(seen.values())


@pytest.fixture(scope="session")
def reachable_3x3():
    return _reachable(3)
