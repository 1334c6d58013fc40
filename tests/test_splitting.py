import pytest

from xdccfetch.splitting import hex_digit_to_int, is_hex_digit, split_args, split_len
from xdccfetch.textfmt import cat_repr


def test_split_len_multichar_separator():
    assert split_len("foo_-_bar", "_-_") == [b"foo", b"bar"]


def test_split_len_empty_input_gives_empty_list():
    assert split_len(b"", b",") == []


def test_split_len_empty_separator_raises():
    with pytest.raises(ValueError):
        split_len(b"abc", b"")


def test_split_len_join_round_trip():
    parts = [b"a", b"", b"bc", b"d"]
    data = b"::".join(parts)
    assert split_len(data, b"::") == parts


def test_split_len_no_separator_returns_whole():
    assert split_len(b"abc", b"|") == [b"abc"]


def test_split_args_documented_example():
    line = 'foo bar "newline are supported\\n" and "\\xff\\x00otherstuff"'
    assert split_args(line) == [
        b"foo",
        b"bar",
        b"newline are supported\n",
        b"and",
        b"\xff\x00otherstuff",
    ]


def test_split_args_empty_line():
    assert split_args("   \t ") == []


def test_split_args_single_quotes_with_escape():
    assert split_args("'it\\'s' x") == [b"it's", b"x"]


@pytest.mark.parametrize("line", ['"foo"bar', "\"foo'", "'foo", "'a'b"])
def test_split_args_unbalanced_quotes_raise(line):
    with pytest.raises(ValueError):
        split_args(line)


@pytest.mark.parametrize(
    "data", [b"\a\n\x00foo\r", b"plain", b'q"uo\\te', b"\t\b\xfe", b""]
)
def test_split_args_reads_back_repr(data):
    assert split_args(cat_repr(data)) == [data]


def test_hex_digits():
    assert all(is_hex_digit(c) for c in "0123456789abcdefABCDEF")
    assert not any(is_hex_digit(c) for c in "gGxz -")
    assert [hex_digit_to_int(c) for c in "09aFf"] == [0, 9, 10, 15, 15]
    assert hex_digit_to_int("z") == 0