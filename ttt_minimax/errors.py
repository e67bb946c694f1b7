"""Exceptions raised by the board, the search engine and the session."""


class TicTacToeError(Exception):
    """Base class for every error raised by ttt_minimax."""
    pass


class InvalidConfig(TicTacToeError, ValueError):
    """Raised when a board size, player symbol or score policy is unusable."""
    pass


class IllegalMove(TicTacToeError, ValueError):
    """Raised for a placement out of range, on an occupied cell, or after the game ended."""
    pass


class NoLegalMove(TicTacToeError, RuntimeError):
    """Raised when a move is requested for a board that is already decided."""
    pass
