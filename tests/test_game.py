from unvoidchess.board import Board
from unvoidchess.game import Game
from unvoidchess.pieces import Color, PieceType


def test_new_game_starts_with_white():
    game = Game(6, 8)
    assert game.current_turn is Color.WHITE


def test_new_game_builds_board_of_requested_size():
    game = Game(7, 9)
    assert isinstance(game.board, Board)
    assert (game.board.width, game.board.height) == (7, 9)
    assert len(game.board.squares) == 9
    assert all(len(row) == 7 for row in game.board.squares)


def test_new_game_board_is_in_starting_position():
    game = Game(6, 6)
    assert game.board.find_piece(PieceType.PRODUCT_OWNER, Color.WHITE) == (5, 0)
    assert game.board.find_piece(PieceType.PRODUCT_OWNER, Color.BLACK) == (0, 5)


def test_switch_turn_goes_to_black():
    game = Game(6, 6)
    game.switch_turn()
    assert game.current_turn is Color.BLACK


def test_switch_turn_twice_returns_to_white():
    game = Game(6, 6)
    game.switch_turn()
    game.switch_turn()
    assert game.current_turn is Color.WHITE