import pytest

from clishell.split import split


@pytest.mark.parametrize("text", ["", " ", "  ", "\t", "  \t \t     ", '""', "''"])
def test_empty_results(text):
    assert split(text) == []


def test_command_line_with_mixed_quotes():
    line = r"""string_cmd "foo 'bar' \"foo\\2" """
    assert split(line) == ["string_cmd", r"""foo 'bar' "foo\2"""]


def test_freeform_arguments():
    assert split("cmd_printer_by_value a b 'c d e' f") == [
        "cmd_printer_by_value",
        "a",
        "b",
        "c d e",
        "f",
    ]


def test_escape_at_word_start():
    assert split(r"\"quoted") == ['"quoted']
    assert split(r"\x") == [r"\x"]


def test_closing_quote_ends_word():
    assert split('"foo"bar') == ["foo", "bar"]


def test_plain_words_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(" ".join(words)) == words
    assert split("\n".join(words)) == words