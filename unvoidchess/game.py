"""State of a single match: the board and whose turn it is."""

from __future__ import annotations

from unvoidchess.board import Board
from unvoidchess.pieces import Color


class Game:
    """A match in progress; white always moves first."""

    def __init__(self, width: int, height: int) -> None:
        self.board = Board(width, height)
        self.current_turn = Color.WHITE

    def switch_turn(self) -> None:
        """Hand the move to the other side."""
        self.current_turn = self.current_turn.opponent