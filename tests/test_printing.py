import io

import pytest

from pushswap.printing import put_char, put_endl, put_number, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("x", out)
    assert out.getvalue() == "x"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_put_char_rejects_non_single(bad):
    with pytest.raises(ValueError):
        put_char(bad, io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("Error\n", out)
    assert out.getvalue() == "Error\n"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("OK", out)
    assert out.getvalue() == "OK\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


@pytest.mark.parametrize("number", [0, 7, 42, -1, 2147483647, -2147483648])
def test_put_number_round_trips(number):
    out = io.StringIO()
    put_number(number, out)
    assert int(out.getvalue()) == number


def test_put_number_negative_has_single_sign():
    out = io.StringIO()
    put_number(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_default_stream_is_stdout(capsys):
    put_str("pa\n")
    put_char("z")
    put_number(5)
    assert capsys.readouterr().out == "pa\nz5"


def test_writes_accumulate():
    out = io.StringIO()
    put_str("sa", out)
    put_endl("", out)
    put_str("rra", out)
    assert out.getvalue().splitlines() == ["sa", "rra"]