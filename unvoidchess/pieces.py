"""Piece kinds, colours and their movement rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Sequence

Squares = Sequence[Sequence[Optional["Piece"]]]
Move = tuple[int, int]

_NEIGHBOURS: tuple[Move, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)

_KNIGHT_JUMPS: tuple[Move, ...] = (
    (2, 1), (1, 2), (-1, 2), (-2, 1),
    (-2, -1), (-1, -2), (1, -2), (2, -1),
)

_DEVELOPER_RANGE = 3


class Color(str, Enum):
    """Side a piece belongs to."""

    WHITE = "white"
    BLACK = "black"

    def __str__(self) -> str:
        return self.value

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class PieceType(str, Enum):
    """Kind of a piece."""

    PRODUCT_OWNER = "ProductOwner"
    DEVELOPER = "Developer"
    DESIGNER = "Designer"

    def __str__(self) -> str:
        return self.value


def _inside(squares: Squares, x: int, y: int) -> bool:
    return 0 <= x < len(squares) and 0 <= y < len(squares[0])


@dataclass(frozen=True, eq=False)
class Piece(ABC):
    """A piece on the board; subclasses define how it moves."""

    color: Color
    piece_type: ClassVar[PieceType]

    @abstractmethod
    def symbol(self) -> str:
        """Glyph used when drawing the board."""

    @abstractmethod
    def valid_moves(self, squares: Squares, x: int, y: int) -> list[Move]:
        """Squares this piece may move to from (x, y)."""

    @abstractmethod
    def can_capture(
        self, squares: Squares, from_x: int, from_y: int, to_x: int, to_y: int
    ) -> bool:
        """Whether this piece could capture on (to_x, to_y) from (from_x, from_y)."""

    def _open_to(self, squares: Squares, x: int, y: int) -> bool:
        target = squares[x][y]
        return target is None or target.color != self.color


class ProductOwner(Piece):
    """Moves one square in any direction; losing it loses the game."""

    piece_type = PieceType.PRODUCT_OWNER

    def symbol(self) -> str:
        return "♔" if self.color is Color.WHITE else "♚"

    def valid_moves(self, squares: Squares, x: int, y: int) -> list[Move]:
        return [
            (x + dx, y + dy)
            for dx, dy in _NEIGHBOURS
            if _inside(squares, x + dx, y + dy) and self._open_to(squares, x + dx, y + dy)
        ]

    def can_capture(
        self, squares: Squares, from_x: int, from_y: int, to_x: int, to_y: int
    ) -> bool:
        return True


class Developer(Piece):
    """Slides up to three squares in a straight or diagonal line."""

    piece_type = PieceType.DEVELOPER

    def symbol(self) -> str:
        return "♖" if self.color is Color.WHITE else "♜"

    def valid_moves(self, squares: Squares, x: int, y: int) -> list[Move]:
        moves: list[Move] = []
        for dx, dy in _NEIGHBOURS:
            for dist in range(1, _DEVELOPER_RANGE + 1):
                nx, ny = x + dx * dist, y + dy * dist
                if not _inside(squares, nx, ny):
                    break
                target = squares[nx][ny]
                if target is None:
                    moves.append((nx, ny))
                    continue
                if target.color != self.color:
                    moves.append((nx, ny))
                break
        return moves

    def can_capture(
        self, squares: Squares, from_x: int, from_y: int, to_x: int, to_y: int
    ) -> bool:
        dx, dy = to_x - from_x, to_y - from_y
        if dx == 0 and dy == 0:
            return False
        steps = max(abs(dx), abs(dy))
        if not 2 <= steps <= _DEVELOPER_RANGE:
            return False
        step_x, step_y = _truncated_div(dx, steps), _truncated_div(dy, steps)
        return all(
            squares[from_x + step_x * i][from_y + step_y * i] is None
            for i in range(1, steps)
        )


class Designer(Piece):
    """Jumps like a knight."""

    piece_type = PieceType.DESIGNER

    def symbol(self) -> str:
        return "♘" if self.color is Color.WHITE else "♞"

    def valid_moves(self, squares: Squares, x: int, y: int) -> list[Move]:
        return [
            (x + dx, y + dy)
            for dx, dy in _KNIGHT_JUMPS
            if _inside(squares, x + dx, y + dy) and self._open_to(squares, x + dx, y + dy)
        ]

    def can_capture(
        self, squares: Squares, from_x: int, from_y: int, to_x: int, to_y: int
    ) -> bool:
        return (to_x, to_y) in self.valid_moves(squares, from_x, from_y)


def _truncated_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


_ALTERNATE_SYMBOLS: dict[tuple[PieceType, Color], str] = {
    (PieceType.PRODUCT_OWNER, Color.WHITE): "♙",
    (PieceType.PRODUCT_OWNER, Color.BLACK): "♟",
    (PieceType.DEVELOPER, Color.WHITE): "♖",
    (PieceType.DEVELOPER, Color.BLACK): "♜",
    (PieceType.DESIGNER, Color.WHITE): "♗",
    (PieceType.DESIGNER, Color.BLACK): "♝",
}


def piece_symbol(piece: Piece) -> str:
    """Alternative glyph for a piece, chosen by its kind and colour."""
    return _ALTERNATE_SYMBOLS.get((piece.piece_type, piece.color), "?")