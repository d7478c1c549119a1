import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def test_putchar_writes_single_character():
    buf = io.StringIO()
    putchar_fd("x", buf)
    assert buf.getvalue() == "x"


def test_putchar_accepts_code_truncated_to_byte():
    buf = io.StringIO()
    putchar_fd(ord("A") + 256, buf)
    assert buf.getvalue() == "A"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", io.StringIO())


def test_putstr_writes_text_unchanged():
    buf = io.StringIO()
    putstr_fd("hello world", buf)
    putstr_fd("", buf)
    assert buf.getvalue() == "hello world"


def test_putstr_rejects_none():
    with pytest.raises(TypeError):
        putstr_fd(None, io.StringIO())


def test_putendl_appends_newline():
    buf = io.StringIO()
    putendl_fd("line", buf)
    assert buf.getvalue() == "line\n"


def test_putendl_empty_string_is_just_newline():
    buf = io.StringIO()
    putendl_fd("", buf)
    assert buf.getvalue() == "\n"


def test_putnbr_zero():
    buf = io.StringIO()
    putnbr_fd(0, buf)
    assert buf.getvalue() == "0"


def test_putnbr_int_min():
    buf = io.StringIO()
    putnbr_fd(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_putnbr_out_of_range_raises():
    with pytest.raises(OverflowError):
        putnbr_fd(2**31, io.StringIO())


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_putnbr_round_trips(n):
    buf = io.StringIO()
    putnbr_fd(n, buf)
    assert int(buf.getvalue()) == n


def test_default_stream_is_stdout(capsys):
    putstr_fd("to stdout")
    assert capsys.readouterr().out == "to stdout"