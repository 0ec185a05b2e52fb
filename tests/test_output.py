import io

import pytest

from ftkit.output import (
    put_char,
    put_endl,
    put_hex,
    put_nbr,
    put_ptr,
    put_set,
    put_str,
)


def test_put_char_writes_character():
    out = io.StringIO()
    assert put_char("z", out) == 1
    assert out.getvalue() == "z"


def test_put_char_defaults_to_stdout(capsys):
    put_char("q")
    assert capsys.readouterr().out == "q"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    assert put_str("hello world", out) == len("hello world")
    assert out.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    assert put_str(None, out) == 0
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    count = put_endl("line", out)
    assert out.getvalue() == "line\n"
    assert count == len(out.getvalue())


@pytest.mark.parametrize("n", [0, 7, 10, 12345, -1, -98765, 2**40])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    count = put_nbr(n, out)
    assert int(out.getvalue()) == n
    assert count == len(out.getvalue())


def test_put_nbr_smallest_int():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 9, 10, 15, 16, 255, 4096, 0xDEADBEEF])
def test_put_hex_round_trip(n):
    lower, upper = io.StringIO(), io.StringIO()
    put_hex(n, lower)
    put_hex(n, upper, uppercase=True)
    assert int(lower.getvalue(), 16) == n
    assert int(upper.getvalue(), 16) == n
    assert lower.getvalue() == lower.getvalue().lower()
    assert upper.getvalue() == upper.getvalue().upper()
    assert lower.getvalue().upper() == upper.getvalue()


def test_put_hex_letters():
    out = io.StringIO()
    put_hex(255, out, uppercase=True)
    assert out.getvalue() == "FF"


def test_put_hex_rejects_negative():
    with pytest.raises(ValueError):
        put_hex(-1, io.StringIO())


@pytest.mark.parametrize("n", [0, 1, 0x7FFF5FBFF8AC, 2**64 - 1])
def test_put_ptr_round_trip(n):
    out = io.StringIO()
    put_ptr(n, out)
    assert int(out.getvalue(), 16) == n
    assert out.getvalue() == out.getvalue().lower()


def test_put_set_repeats():
    out = io.StringIO()
    assert put_set("0", 6, out) == 6
    assert out.getvalue() == "0" * 6


@pytest.mark.parametrize("count", [0, -3])
def test_put_set_nonpositive_writes_nothing(count):
    out = io.StringIO()
    assert put_set(" ", count, out) == 0
    assert out.getvalue() == ""