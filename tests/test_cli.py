import io

import pytest

from unvoidchess.cli import ask_board_dimensions, main, run

BAD_SIZE = "Invalid input. Please enter a number between 6 and 12."


def play(text):
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue()


def test_ask_board_dimensions_returns_width_and_height():
    out = io.StringIO()
    assert ask_board_dimensions(io.StringIO("7\n9\n"), out) == (7, 9)
    assert "Starting match on an 7x9 board..." in out.getvalue()


def test_ask_board_dimensions_shows_welcome():
    out = io.StringIO()
    ask_board_dimensions(io.StringIO("6\n6\n"), out)
    assert "| Welcome to Unvoid Chess |" in out.getvalue()


@pytest.mark.parametrize("bad", ["5", "13", "abc", "", "6.5"])
def test_ask_board_dimensions_retries_on_bad_value(bad):
    out = io.StringIO()
    assert ask_board_dimensions(io.StringIO(f"{bad}\n8\n10\n"), out) == (8, 10)
    assert out.getvalue().count(BAD_SIZE) == 1


def test_ask_board_dimensions_accepts_limits():
    assert ask_board_dimensions(io.StringIO("6\n12\n"), io.StringIO()) == (6, 12)


def test_ask_board_dimensions_raises_at_end_of_input():
    with pytest.raises(EOFError):
        ask_board_dimensions(io.StringIO("7\n"), io.StringIO())


def test_exit_says_goodbye():
    output = play("6\n6\nexit\n")
    assert output.endswith("Goodbye!\n")
    assert "Turn: White" in output


def test_help_lists_commands():
    output = play("6\n6\nhelp\nexit\n")
    assert "Available commands:" in output
    assert "  move <from> <to>   Move a piece (e.g., move A1 B3)" in output


def test_unknown_command():
    assert "Unknown command. Type 'help' for options." in play("6\n6\njump\nexit\n")


def test_move_with_wrong_argument_count_is_unknown():
    assert "Unknown command. Type 'help' for options." in play("6\n6\nmove A1\nexit\n")


def test_invalid_coordinates():
    assert "Invalid coordinates. Use format like A1 B3." in play("6\n6\nmove Z9 A1\nexit\n")


def test_same_square():
    output = play("6\n6\nmove A1 A1\nexit\n")
    assert "Destination must be different from origin." in output


def test_no_piece_at_origin():
    assert "No piece at origin." in play("6\n6\nmove C3 C4\nexit\n")


def test_cannot_move_opponent_piece():
    assert "You can't move your opponent's piece." in play("6\n6\nmove F6 F5\nexit\n")


def test_invalid_move_for_piece():
    output = play("6\n6\nmove A1 A3\nexit\n")
    assert "Invalid move for this piece." in output
    assert "Turn: Black" not in output


def test_valid_move_passes_turn():
    output = play("6\n6\nmove B1 E4\nexit\n")
    assert "Turn: Black" in output


def test_restart_asks_for_new_size():
    output = play("6\n6\nrestart\n7\n7\nexit\n")
    assert "Starting match on an 7x7 board..." in output


def test_capturing_product_owner_wins():
    moves = "move B1 E4\nmove D6 C4\nmove E4 F5\nmove C4 B6\nmove F5 F6\n"
    output = play("6\n6\n" + moves + "exit\n")
    assert "White wins! 🎉" in output
    assert output.endswith("Goodbye!\n")


def test_after_win_only_restart_or_exit():
    moves = "move B1 E4\nmove D6 C4\nmove E4 F5\nmove C4 B6\nmove F5 F6\n"
    output = play("6\n6\n" + moves + "help\nrestart\n8\n8\nexit\n")
    assert output.count("Type 'restart' to play again or 'exit' to leave.") == 2
    assert "Starting match on an 8x8 board..." in output
    assert output.endswith("Goodbye!\n")


def test_end_of_input_stops_quietly():
    output = play("6\n6\n")
    assert output.endswith("Type a command (move <from> <to>, help, restart, exit): ")


def test_main_plays_on_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("6\n6\nexit\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Goodbye!\n")