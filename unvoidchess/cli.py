"""Interactive console game."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional, TextIO

from unvoidchess.board import parse_coord
from unvoidchess.game import Game
from unvoidchess.pieces import Color, PieceType

MIN_SIZE = 6
MAX_SIZE = 12

_INTEGER = re.compile(r"[+-]?[0-9]+")

_WELCOME = (
    "\n"
    "+-------------------------+\n"
    "| Welcome to Unvoid Chess |\n"
    "+-------------------------+\n"
    "\n"
    "Select board size to start.\n"
    "Values must be from 6 to 12 on each dimension.\n"
)

_BAD_SIZE = "Invalid input. Please enter a number between 6 and 12.\n"

_PROMPT = "Type a command (move <from> <to>, help, restart, exit): "

_HELP = (
    "Available commands:\n"
    "  move <from> <to>   Move a piece (e.g., move A1 B3)\n"
    "  restart            Restart the match\n"
    "  help               Show this list\n"
    "  exit               Exit the game\n"
)

_PLAY_AGAIN = "Type 'restart' to play again or 'exit' to leave.\n"
_GOODBYE = "Goodbye!\n"


def _read_line(reader: TextIO) -> str:
    line = reader.readline()
    if line == "":
        raise EOFError("input ended")
    return line.strip()


def _prompt(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def _title(color: Color) -> str:
    return color.value.title()


def _ask_dimension(reader: TextIO, out: TextIO, label: str) -> int:
    while True:
        _prompt(out, f"Enter board {label}: ")
        text = _read_line(reader)
        if _INTEGER.fullmatch(text) and MIN_SIZE <= int(text) <= MAX_SIZE:
            return int(text)
        out.write(_BAD_SIZE)


def ask_board_dimensions(
    reader: Optional[TextIO] = None, out: Optional[TextIO] = None
) -> tuple[int, int]:
    """Greet the player and ask for a board width and height.

    Raises EOFError if the input ends before both are given.
    """
    reader = sys.stdin if reader is None else reader
    out = sys.stdout if out is None else out
    out.write(_WELCOME)
    width = _ask_dimension(reader, out, "width (X)")
    height = _ask_dimension(reader, out, "height (Y)")
    out.write(f"\nStarting match on an {width}x{height} board...\n\n")
    return width, height


def _new_game(reader: TextIO, out: TextIO) -> Game:
    return Game(*ask_board_dimensions(reader, out))


def _play_move(game: Game, origin: str, destination: str, out: TextIO) -> bool:
    """Try a move for the side to play; return True if it won the game."""
    board = game.board
    try:
        from_x, from_y = parse_coord(origin, board.width, board.height)
        to_x, to_y = parse_coord(destination, board.width, board.height)
    except ValueError:
        out.write("Invalid coordinates. Use format like A1 B3.\n")
        return False
    if (from_x, from_y) == (to_x, to_y):
        out.write("Destination must be different from origin.\n")
        return False
    piece = board.squares[from_x][from_y]
    if piece is None:
        out.write("No piece at origin.\n")
        return False
    if piece.color != game.current_turn:
        out.write("You can't move your opponent's piece.\n")
        return False
    if not board.is_valid_move(from_x, from_y, to_x, to_y):
        out.write("Invalid move for this piece.\n")
        return False
    captured = board.move_piece(from_x, from_y, to_x, to_y)
    if captured is not None and captured.piece_type is PieceType.PRODUCT_OWNER:
        return True
    game.switch_turn()
    return False


def _after_win(game: Game, reader: TextIO, out: TextIO) -> Optional[Game]:
    """Announce the winner and return a fresh game, or None to quit."""
    game.board.display(out)
    out.write(f"{_title(game.current_turn)} wins! 🎉\n")
    out.write(_PLAY_AGAIN)
    while True:
        _prompt(out, "> ")
        command = _read_line(reader)
        if command == "restart":
            return _new_game(reader, out)
        if command == "exit":
            out.write(_GOODBYE)
            return None
        out.write(_PLAY_AGAIN)


def run(reader: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
    """Play matches until the player exits or the input ends."""
    reader = sys.stdin if reader is None else reader
    out = sys.stdout if out is None else out
    try:
        game = _new_game(reader, out)
        while True:
            game.board.display(out)
            out.write(f"Turn: {_title(game.current_turn)}\n")
            _prompt(out, _PROMPT)
            line = _read_line(reader)

            if line == "exit":
                out.write(_GOODBYE)
                return
            if line == "help":
                out.write(_HELP)
                continue
            if line == "restart":
                game = _new_game(reader, out)
                continue

            parts = line.split()
            if len(parts) == 3 and parts[0] == "move":
                if _play_move(game, parts[1], parts[2], out):
                    next_game = _after_win(game, reader, out)
                    if next_game is None:
                        return
                    game = next_game
            else:
                out.write("Unknown command. Type 'help' for options.\n")
    except EOFError:
        return


def main(argv: Optional[list[str]] = None) -> int:
    """Start an interactive match on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="unvoidchess", description="Play Unvoid Chess in the terminal."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())