import io

import pytest

from minishell.output import write_char, write_endl, write_number, write_str


def test_write_char_writes_one_character():
    buf = io.StringIO()
    write_char("z", buf)
    assert buf.getvalue() == "z"


def test_write_char_rejects_longer_text():
    with pytest.raises(ValueError):
        write_char("ab", io.StringIO())


def test_write_str_writes_text():
    buf = io.StringIO()
    write_str("hello world", buf)
    assert buf.getvalue() == "hello world"


def test_write_str_none_writes_nothing():
    buf = io.StringIO()
    write_str(None, buf)
    assert buf.getvalue() == ""


def test_write_endl_appends_newline():
    buf = io.StringIO()
    write_endl("line", buf)
    assert buf.getvalue() == "line" + "\n"


def test_write_endl_none_writes_nothing():
    buf = io.StringIO()
    write_endl(None, buf)
    assert buf.getvalue() == ""


def test_write_endl_matches_str_then_newline():
    a = io.StringIO()
    b = io.StringIO()
    write_endl("syntax error", a)
    write_str("syntax error", b)
    write_char("\n", b)
    assert a.getvalue() == b.getvalue()


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647, -2147483648])
def test_write_number_round_trips_through_int(n):
    buf = io.StringIO()
    write_number(n, buf)
    assert int(buf.getvalue()) == n


def test_write_number_minimum_int():
    buf = io.StringIO()
    write_number(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_write_number_rejects_float():
    with pytest.raises(TypeError):
        write_number(1.5, io.StringIO())


def test_default_stream_is_stdout(capsys):
    write_str("out")
    write_number(12)
    assert capsys.readouterr().out == "out" + "12"