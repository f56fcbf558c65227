import io

from seirgrid.terminal import CLEAR_SCREEN, clear_term, cleanup, join_strings


def test_join_strings_round_trip():
    columns = ["iteration", "susceptible", "exposed", "infectious", "recovered", "dim"]
    joined = join_strings(columns)
    assert joined.split(",") == columns


def test_join_strings_single_item_unchanged():
    assert join_strings(["iteration"]) == "iteration"


def test_join_strings_empty():
    assert join_strings([]) == ""


def test_join_strings_accepts_generator():
    words = ["total_moves", "total_exposures"]
    assert join_strings(w for w in words) == join_strings(words)
    assert join_strings(words).count(",") == len(words) - 1


def test_clear_term_writes_escape_sequence():
    buffer = io.StringIO()
    clear_term(buffer)
    assert buffer.getvalue() == CLEAR_SCREEN
    assert buffer.getvalue().startswith("\x1b[")


def test_clear_term_defaults_to_stdout(capsys):
    clear_term()
    assert capsys.readouterr().out == CLEAR_SCREEN


def test_cleanup_message():
    buffer = io.StringIO()
    cleanup(buffer)
    assert buffer.getvalue() == "Cleaning up resources...\n"


def test_cleanup_defaults_to_stdout(capsys):
    cleanup()
    assert capsys.readouterr().out == "Cleaning up resources...\n"