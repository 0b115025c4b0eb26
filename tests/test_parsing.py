import pytest

from pushswap.parsing import (
    ParseError,
    join_arguments,
    parse_arguments,
    parse_int,
    split_words,
)


@pytest.mark.parametrize("number", [0, 1, -1, 123456, -98765, 2147483647, -2147483648])
def test_parse_int_round_trip(number):
    assert parse_int(str(number)) == number


def test_parse_int_signs_and_spaces():
    assert parse_int("+7") == 7
    assert parse_int("-0") == 0
    assert parse_int("   42") == 42


@pytest.mark.parametrize(
    "text",
    [
        "",
        "+",
        "-",
        "--1",
        "+-1",
        "12a",
        "1 2",
        "4 ",
        "\t5",
        "2147483648",
        "-2147483649",
        "99999999999999999999999999",
        "1.5",
    ],
)
def test_parse_int_rejects(text):
    with pytest.raises(ParseError):
        parse_int(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


def test_join_arguments():
    assert join_arguments(["1 2", "3"]) == "1 2 3"
    assert join_arguments(["5"]) == "5"


@pytest.mark.parametrize("args", [[], [""], ["1", ""], ["", "2"]])
def test_join_arguments_rejects_empty(args):
    with pytest.raises(ParseError):
        join_arguments(args)


def test_split_words_drops_empty_pieces():
    assert split_words("  a  b ", " ") == ["a", "b"]
    assert split_words("", " ") == []
    assert split_words("x,y,,z", ",") == ["x", "y", "z"]


def test_split_words_rejoin_round_trip():
    words = ["10", "-3", "7"]
    assert split_words(" ".join(words), " ") == words


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3 1", "2"]) == [3, 1, 2]
    assert parse_arguments(["  -5   8 "]) == [-5, 8]


def test_parse_arguments_round_trip():
    values = [17, -4, 0, 2147483647, -2147483648]
    assert parse_arguments([str(v) for v in values]) == values


@pytest.mark.parametrize(
    "args",
    [
        [],
        [" "],
        ["1", "1"],
        ["1 +1"],
        ["0 -0"],
        ["1", ""],
        ["1\t2"],
        ["1", "two"],
        ["2147483648"],
    ],
)
def test_parse_arguments_rejects(args):
    with pytest.raises(ParseError):
        parse_arguments(args)