#!/usr/bin/env python3
"""
Play N×N TicTacToe in the terminal, against the minimax AI or a friend.

Usage:
  python -m ttt_minimax.play                      # you are X, AI is O, X starts
  python -m ttt_minimax.play --human O --first O  # you are O and move first
  python -m ttt_minimax.play --mode human         # two players, one keyboard
  python -m ttt_minimax.play --size 4 --depth 5 --heatmap
Enter moves as "row col", 0-indexed.
"""
import argparse

from .board import Player
from .errors import InvalidConfig
from .heatmaps import plot_heatmap, scores_to_grid
from .players import HumanPlayer, MinimaxPlayer
from .session import GameSession, SessionConfig


def play(session: GameSession, x_player, o_player, print_game=True, heatmap=False):
    """Runs one round to the end. Returns the winning Player, or None on a draw."""
    players = {Player.X: x_player, Player.O: o_player}

    if print_game:
        print(session.board.render())

    while not session.is_over:
        letter = session.turn
        current = players[letter]
        if isinstance(current, MinimaxPlayer):
            square, scores = current.get_move_with_scores(session.board)
            if heatmap:
                print("AI is thinking... Here are its move scores:")
                plot_heatmap(scores_to_grid(scores, session.board.size),
                             f"Minimax Move Scores (AI is '{letter.symbol}')")
        else:
            square = current.get_move(session.board)

        session.play(square)
        if print_game:
            print(f'\n{letter.symbol} makes a move to square {square}')
            print(session.board.render())
            print('')

    winner = session.winner
    if print_game:
        if winner is None:
            print('It\'s a tie!')
        else:
            print(f'{winner.symbol} wins! Line: {list(session.winning_line())}')
    return winner


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="N×N TicTacToe against minimax or a second human")
    ap.add_argument("--size", type=int, default=3, help="board dimension N (default 3)")
    ap.add_argument("--human", choices=["X", "O"], default="X", help="symbol the human plays in ai mode")
    ap.add_argument("--first", choices=["X", "O"], default="X", help="symbol that moves first")
    ap.add_argument("--mode", choices=["ai", "human"], default="ai", help="opponent type")
    ap.add_argument("--depth", type=int, default=None, help="search depth limit (default: min(cells, 9))")
    ap.add_argument("--no-prune", action="store_true", help="disable alpha-beta pruning")
    ap.add_argument("--heatmap", action="store_true", help="show the AI's move scores before each AI move")
    ap.add_argument("--rounds", type=int, default=1, help="number of rounds to play")
    return ap, ap.parse_args(argv)


def main(argv=None):
    ap, args = parse_args(argv)
    if args.rounds < 1:
        ap.error("--rounds must be >= 1")

    config = SessionConfig(
        grid_size=args.size,
        human=Player.parse(args.human),
        first=Player.parse(args.first),
        mode=args.mode,
        depth=args.depth,
        use_alpha_beta=not args.no_prune,
    )
    try:
        session = GameSession(config)
    except InvalidConfig as e:
        ap.error(str(e))

    if session.engine is not None:
        ai = MinimaxPlayer(session.ai_player, engine=session.engine, verbose=True)
        human = HumanPlayer(config.human)
        x_player, o_player = (human, ai) if config.human == Player.X else (ai, human)
    else:
        x_player, o_player = HumanPlayer(Player.X), HumanPlayer(Player.O)

    tally = {"X": 0, "O": 0, "Draw": 0}
    for rnd in range(args.rounds):
        if rnd:
            session.reset()
        if args.rounds > 1:
            print(f"=== Round {rnd + 1} of {args.rounds} ===")
        winner = play(session, x_player, o_player, print_game=True, heatmap=args.heatmap)
        tally[winner.symbol if winner is not None else "Draw"] += 1

    if args.rounds > 1:
        print(f"Final tally: X {tally['X']}, O {tally['O']}, draws {tally['Draw']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
