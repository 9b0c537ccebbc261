"""The playing board and coordinate parsing."""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

from unvoidchess.pieces import Color, Designer, Developer, Piece, PieceType, ProductOwner

_ROW_NUMBER = re.compile(r"[+-]?[0-9]+")


class Board:
    """A rectangular grid of squares, indexed as squares[row][column] from the top."""

    def __init__(self, width: int, height: int) -> None:
        if width < 3 or height < 1:
            raise ValueError(f"board of {width}x{height} is too small")
        self.width = width
        self.height = height
        self.squares: list[list[Optional[Piece]]] = []
        self.initialize()

    def initialize(self) -> None:
        """Clear the board and set up the starting position."""
        self.squares = [[None] * self.width for _ in range(self.height)]
        bottom = self.squares[self.height - 1]
        bottom[0] = ProductOwner(Color.WHITE)
        bottom[1] = Developer(Color.WHITE)
        bottom[2] = Designer(Color.WHITE)
        top = self.squares[0]
        top[self.width - 1] = ProductOwner(Color.BLACK)
        top[self.width - 2] = Developer(Color.BLACK)
        top[self.width - 3] = Designer(Color.BLACK)

    def render(self) -> str:
        """The board as text, with column letters and row numbers."""
        header = "   " + "".join(f"{chr(ord('A') + c)} " for c in range(self.width))
        rows = [
            f"{self.height - i:2d} "
            + "".join(("." if p is None else p.symbol()) + " " for p in row)
            for i, row in enumerate(self.squares)
        ]
        return "\n".join([header, *rows]) + "\n"

    def display(self, out: Optional[TextIO] = None) -> None:
        """Write the rendered board to out (standard output by default)."""
        (out if out is not None else sys.stdout).write(self.render())

    def find_piece(self, piece_type: PieceType, color: Color) -> Optional[tuple[int, int]]:
        """Position of the first matching piece, scanning from the top, or None."""
        for i, row in enumerate(self.squares):
            for j, piece in enumerate(row):
                if piece is not None and piece.piece_type == piece_type and piece.color == color:
                    return i, j
        return None

    def move_piece(self, from_x: int, from_y: int, to_x: int, to_y: int) -> Optional[Piece]:
        """Move a piece and return whatever stood on the destination."""
        piece = self.squares[from_x][from_y]
        if piece is None:
            raise ValueError(f"no piece at ({from_x}, {from_y})")
        captured = self.squares[to_x][to_y]
        self.squares[to_x][to_y] = piece
        self.squares[from_x][from_y] = None
        return captured

    def is_valid_move(self, from_x: int, from_y: int, to_x: int, to_y: int) -> bool:
        """Whether the piece at the origin may move to the destination."""
        piece = self.squares[from_x][from_y]
        if piece is None:
            return False
        return (to_x, to_y) in piece.valid_moves(self.squares, from_x, from_y)


def parse_coord(coord: str, width: int, height: int) -> tuple[int, int]:
    """Turn a square name such as "B3" into (row, column) indices."""
    if len(coord) < 2:
        raise ValueError(f"invalid coordinate: {coord!r}")
    letter = coord[0].upper()
    number = coord[1:]
    if len(letter) != 1 or not _ROW_NUMBER.fullmatch(number):
        raise ValueError(f"invalid coordinate: {coord!r}")
    col = ord(letter) - ord("A")
    row_idx = height - int(number)
    if not (0 <= col < width and 0 <= row_idx < height):
        raise ValueError(f"coordinate off the board: {coord!r}")
    return row_idx, col