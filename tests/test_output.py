import io

import pytest

from cubescape.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_char():
    buf = io.StringIO()
    put_char("x", buf)
    put_char("y", buf)
    assert buf.getvalue() == "xy"


def test_put_char_rejects_multiple_chars():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str():
    buf = io.StringIO()
    put_str("Map Invalid!", buf)
    put_str(None, buf)
    assert buf.getvalue() == "Map Invalid!"


def test_put_endl():
    buf = io.StringIO()
    put_endl("File Invalid!", buf)
    assert buf.getvalue() == "File Invalid!\n"
    other = io.StringIO()
    put_endl(None, other)
    assert other.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, -42, 255, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n
    assert buf.getvalue().startswith("-") == (n < 0)


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("NO --> ", None)
    put_nbr(-5)
    put_endl("")
    assert capsys.readouterr().out == "NO --> -5\n"