import io

import pytest

from aockit.errors import InputError, InvalidArgumentError
from aockit.snailfish_number import ChildPosition, Pair, parse_number, read_numbers

LEFT = ChildPosition.LEFT
RIGHT = ChildPosition.RIGHT


def test_complement():
    assert LEFT.complement() is RIGHT
    assert RIGHT.complement() is LEFT


@pytest.mark.parametrize(
    "text",
    [
        "[1,2]",
        "[[1,2],3]",
        "[9,[8,7]]",
        "[[1,9],[8,5]]",
        "[[[[1,2],[3,4]],[[5,6],[7,8]]],9]",
        "[[[9,[3,8]],[[0,9],6]],[[[3,7],[4,9]],3]]",
        "[[[[0,7],4],[[7,8],[6,0]]],[8,1]]",
    ],
)
def test_parse_and_str_round_trip(text):
    assert str(parse_number(text)) == text


def test_multi_digit_values():
    number = parse_number("[10,[123,4]]")
    assert number.child(LEFT) == 10
    assert number.child(RIGHT) == Pair(123, 4)


def test_empty_string_is_zero_pair():
    assert parse_number("") == Pair(0, 0)
    assert str(Pair()) == "[0,0]"


def test_trailing_text_is_ignored():
    assert parse_number("[1,2]xyz") == Pair(1, 2)


@pytest.mark.parametrize("text", ["1,2]", "[1,2", "[1;2]", "[,2]", "[1", "[1,]", "x"])
def test_malformed_input_raises(text):
    with pytest.raises(InputError):
        parse_number(text)


def test_magnitude_examples():
    assert parse_number("[[1,2],[[3,4],5]]").magnitude() == 143
    assert parse_number("[[[[0,7],4],[[7,8],[6,0]]],[8,1]]").magnitude() == 1384


def test_parent_and_position_links():
    number = parse_number("[[1,2],[3,[4,5]]]")
    assert number.parent() is None
    assert number.position() is None
    left = number.child(LEFT)
    right = number.child(RIGHT)
    assert left.parent() is number
    assert left.position() is LEFT
    assert right.parent() is number
    assert right.position() is RIGHT
    inner = right.child(RIGHT)
    assert inner.parent() is right
    assert inner.position() is RIGHT


def test_equality_is_structural():
    assert parse_number("[[1,2],3]") == Pair(Pair(1, 2), 3)
    assert not (parse_number("[[1,2],3]") == parse_number("[3,[1,2]]"))
    assert not (Pair(1, 2) == Pair(Pair(1, 2), 2))


def test_copy_is_detached_and_equal():
    number = parse_number("[[1,2],[3,4]]")
    child = number.child(LEFT)
    duplicate = child.copy()
    assert duplicate == child
    assert duplicate.parent() is None
    duplicate.set_child(LEFT, 9)
    assert str(number) == "[[1,2],[3,4]]"
    assert str(duplicate) == "[9,2]"


def test_set_child_attaches_pair():
    number = Pair(1, 2)
    inner = Pair(3, 4)
    number.set_child(RIGHT, inner)
    assert str(number) == "[1,[3,4]]"
    assert number.child(RIGHT).parent() is number
    assert number.child(RIGHT).position() is RIGHT


def test_set_child_copies_pair_owned_elsewhere():
    first = parse_number("[[1,2],3]")
    owned = first.child(LEFT)
    second = Pair(0, 0)
    second.set_child(LEFT, owned)
    assert second.child(LEFT) == owned
    assert second.child(LEFT) is not owned
    assert owned.parent() is first


@pytest.mark.parametrize("value", [-1, "3", 1.5, True, None])
def test_invalid_elements_raise(value):
    with pytest.raises(InvalidArgumentError):
        Pair(value, 0)


def test_read_numbers_from_stream():
    stream = io.StringIO("[1,2]\n[[3,4],5]\n  [6,[7,8]]\n")
    numbers = read_numbers(stream)
    assert [str(n) for n in numbers] == ["[1,2]", "[[3,4],5]", "[6,[7,8]]"]


def test_read_numbers_empty_stream():
    assert read_numbers(io.StringIO("")) == []


def test_read_numbers_propagates_errors():
    with pytest.raises(InputError):
        read_numbers(io.StringIO("[1,2]\n[1;2]\n"))