import io

import pytest

from treasure.output import put_char, put_endl, put_nbr, put_str


def test_put_char():
    stream = io.StringIO()
    put_char("x", stream)
    put_char("y", stream)
    assert stream.getvalue() == "xy"


def test_put_char_rejects_string():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str():
    stream = io.StringIO()
    put_str("batata", stream)
    assert stream.getvalue() == "batata"


def test_put_endl():
    stream = io.StringIO()
    put_endl("batata", stream)
    assert stream.getvalue() == "batata\n"


@pytest.mark.parametrize("n,text", [(483648, "483648"), (-2147483648, "-2147483648"), (0, "0")])
def test_put_nbr(n, text):
    stream = io.StringIO()
    put_nbr(n, stream)
    assert stream.getvalue() == text


def test_put_nbr_round_trip():
    for n in (-42, 7, 2147483647):
        stream = io.StringIO()
        put_nbr(n, stream)
        assert int(stream.getvalue()) == n


def test_default_stream_is_stdout(capsys):
    put_str("batata")
    put_endl("")
    assert capsys.readouterr().out == "batata\n"