# unvoidchess

A two-player chess variant for the terminal. Each side starts with three
pieces on a board whose width and height you pick, from 6 to 12 squares each:

| Piece         | White | Black | Movement                                                                 |
|---------------|-------|-------|--------------------------------------------------------------------------|
| Product Owner | ♔     | ♚     | One square in any direction                                              |
| Developer     | ♖     | ♜     | Up to three squares in any straight or diagonal line, stopped by a piece |
| Designer      | ♘     | ♞     | L-shaped jump, like a knight                                             |

A piece may move onto an empty square or capture an opposing piece; it may
never land on a piece of its own colour.

White starts in the bottom-left corner (Product Owner, Developer, Designer
from the left) and Black in the top-right corner (Product Owner, Developer,
Designer from the right). White moves first. Capture the opponent's Product
Owner to win.

## Installation

```
pip install .
```

## Playing

```
unvoidchess
```

The command takes no options besides `--help`. You are asked for the board
width and then the height; anything other than a whole number from 6 to 12
is rejected and asked for again. The board is then shown with columns
lettered from `A` and rows numbered from the bottom. Commands:

```
move <from> <to>   Move a piece (e.g., move A1 B3)
restart            Restart the match
help               Show this list
exit               Exit the game
```

Column letters are case-insensitive, so `move a1 b3` works too. A move is
refused, with a message, if a coordinate is off the board or malformed, the
destination equals the origin, there is no piece at the origin, the piece
belongs to the other side, or the piece cannot reach the destination. After
a win, type `restart` to play again or `exit` to leave. The game also ends
quietly when standard input ends.

## Using the library

The rules can be used without the terminal interface:

```python
from unvoidchess.board import Board, parse_coord
from unvoidchess.pieces import Color, PieceType

board = Board(8, 8)
print(board.render())

from_x, from_y = parse_coord("A1", board.width, board.height)
to_x, to_y = parse_coord("A2", board.width, board.height)
if board.is_valid_move(from_x, from_y, to_x, to_y):
    captured = board.move_piece(from_x, from_y, to_x, to_y)

row, col = board.find_piece(PieceType.PRODUCT_OWNER, Color.BLACK)
```

- `unvoidchess.board.Board(width, height)` keeps its grid in `squares`,
  indexed `squares[row][column]` with row 0 at the top. It raises
  `ValueError` for a board narrower than 3 or shorter than 1 square.
  `initialize()` resets the starting position, `render()` returns the board
  as text and `display(out)` writes it to a stream (standard output by
  default). `find_piece()` returns the first matching `(row, column)` or
  `None`. `move_piece()` returns the captured piece or `None`, and raises
  `ValueError` if the origin is empty; it does not check the rules, which is
  what `is_valid_move()` is for.
- `unvoidchess.board.parse_coord(coord, width, height)` turns a name such as
  `"B3"` into `(row, column)` and raises `ValueError` if it is malformed or
  off the board.
- `unvoidchess.pieces` holds `Color`, `PieceType`, the abstract `Piece` and
  the `ProductOwner`, `Developer` and `Designer` classes, each with
  `symbol()`, `valid_moves(squares, x, y)` and
  `can_capture(squares, from_x, from_y, to_x, to_y)`. `piece_symbol(piece)`
  gives an alternative set of glyphs (♙/♟, ♖/♜, ♗/♝).
- `unvoidchess.game.Game(width, height)` holds a `board` together with the
  side to move in `current_turn`; `switch_turn()` passes the turn to the
  other player.
- `unvoidchess.cli` provides `ask_board_dimensions(reader, out)`,
  `run(reader, out)` and `main(argv)`; `run` plays on any pair of text
  streams, which makes it easy to script.
- `unvoidchess.userinput` has `read_input(prompt, stream)`, which prints a
  prompt and returns the next line trimmed (empty at end of input), and
  `validate_input(text)`, which is true for any non-empty string.

## What it does not do

There is no check, checkmate or stalemate detection: a game is won only by
capturing the Product Owner. Games cannot be saved or loaded, there is no
move history or undo, and there is no computer opponent or network play.

## Running the tests

```
pip install .[test]
pytest
```