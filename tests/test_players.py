import pytest

from ttt_minimax.board import BoardState, Player
from ttt_minimax.errors import InvalidConfig
from ttt_minimax.players import HumanPlayer, MinimaxPlayer
from ttt_minimax.search import SearchEngine


def scripted(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_human_player_reprompts_until_valid(capsys):
    board = BoardState.from_rows(["X..", "...", "..."])
    human = HumanPlayer("O", input_fn=scripted("oops", "0 0 1", "0 0", "5 5", "1 2"))
    assert human.get_move(board) == (1, 2)
    out = capsys.readouterr().out
    assert out.count('Invalid input format') == 2
    assert out.count('Invalid square. Try again.') == 2


def test_human_player_uses_builtin_input(monkeypatch):
    monkeypatch.setattr("builtins.input", scripted("2 0"))
    assert HumanPlayer(Player.X).get_move(BoardState(3)) == (2, 0)


def test_minimax_player_matches_engine():
    board = BoardState.from_rows(["X..", "OO.", "..X"])
    player = MinimaxPlayer("X")
    move, scores = player.get_move_with_scores(board)
    assert move == (1, 2) == SearchEngine(Player.X).best_move(board)
    assert set(scores) == set(board.available_positions())
    assert player.get_move(board) == move


def test_minimax_player_verbose(capsys):
    board = BoardState.from_rows(["XX.", "OO.", "..."])
    MinimaxPlayer(Player.X, verbose=True).get_move(board)
    out = capsys.readouterr().out
    assert "AI (X) chooses move: (0, 2) with score: 1" in out


def test_minimax_player_shares_engine():
    engine = SearchEngine(Player.O, depth=3)
    assert MinimaxPlayer(Player.O, engine=engine).engine is engine
    with pytest.raises(InvalidConfig):
        MinimaxPlayer(Player.X, engine=engine)
