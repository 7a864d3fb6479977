"""Snailfish numbers: binary trees of pairs whose leaves are regular numbers."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Optional, TextIO, Union

from .errors import InputError, InvalidArgumentError


class ChildPosition(Enum):
    """Which side of its parent pair an element sits on."""

    LEFT = "left"
    RIGHT = "right"

    def complement(self) -> "ChildPosition":
        """The opposite side."""
        return ChildPosition.RIGHT if self is ChildPosition.LEFT else ChildPosition.LEFT


Element = Union[int, "Pair"]


class Pair:
    """A snailfish pair; each child is a regular number or another pair.

    Child pairs know their parent and the side they sit on, so a reduction
    can walk up and across the tree.
    """

    def __init__(self, left: Element = 0, right: Element = 0) -> None:
        self._parent: Optional[Pair] = None
        self._position: Optional[ChildPosition] = None
        self._left: Element = 0
        self._right: Element = 0
        self.set_child(ChildPosition.LEFT, left)
        self.set_child(ChildPosition.RIGHT, right)

    def child(self, position: ChildPosition) -> Element:
        """The element on the given side."""
        return self._left if position is ChildPosition.LEFT else self._right

    def set_child(self, position: ChildPosition, value: Element) -> None:
        """Replace the element on the given side.

        A pair that already belongs to another tree is copied first, so the
        other tree is left untouched.
        """
        if isinstance(value, Pair):
            if value._parent is not None and value._parent is not self:
                value = value.copy()
            value._parent = self
            value._position = position
        elif isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"Invalid snailfish element: {value!r}")
        elif value < 0:
            raise InvalidArgumentError(f"Snailfish numbers cannot be negative: {value}")
        if position is ChildPosition.LEFT:
            self._left = value
        else:
            self._right = value

    def parent(self) -> Optional["Pair"]:
        """The pair holding this one, or ``None`` at the root."""
        return self._parent

    def position(self) -> Optional[ChildPosition]:
        """The side of its parent this pair sits on, or ``None`` at the root."""
        return self._position

    def magnitude(self) -> int:
        """Three times the left magnitude plus twice the right."""
        return 3 * _magnitude(self._left) + 2 * _magnitude(self._right)

    def copy(self) -> "Pair":
        """A deep, detached copy of this pair."""
        return Pair(_copy(self._left), _copy(self._right))

    def __str__(self) -> str:
        return f"[{self._left},{self._right}]"

    def __repr__(self) -> str:
        return f"Pair({self._left!r}, {self._right!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return _same(self._left, other._left) and _same(self._right, other._right)

    __hash__ = None  # type: ignore[assignment]


def _magnitude(element: Element) -> int:
    return element.magnitude() if isinstance(element, Pair) else element


def _copy(element: Element) -> Element:
    return element.copy() if isinstance(element, Pair) else element


def _same(a: Element, b: Element) -> bool:
    if isinstance(a, Pair) != isinstance(b, Pair):
        return False
    return a == b


def _parse_pair(text: str, pos: int) -> tuple[Pair, int]:
    if pos >= len(text) or text[pos] != "[":
        raise InputError("Failed to create snailfish value - invalid opening")
    left, pos = _read_element(text, pos + 1)
    if pos >= len(text) or text[pos] != ",":
        raise InputError("Failed to create snailfish value - unexpected non-numeric value")
    right, pos = _read_element(text, pos + 1)
    if pos >= len(text) or text[pos] != "]":
        raise InputError("Failed to create snailfish value - unexpected value termination")
    return Pair(left, right), pos + 1


def _read_element(text: str, pos: int) -> tuple[Element, int]:
    if pos >= len(text):
        raise InputError("Failed to create snailfish value - unexpected end of input")
    if text[pos] == "[":
        return _parse_pair(text, pos)
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    if end == pos:
        raise InputError(f"Failed to create snailfish value - expected digits at {pos}")
    return int(text[pos:end]), end


def parse_number(text: str) -> Pair:
    """Parse a snailfish number such as ``[[1,2],3]``.

    An empty string gives ``[0,0]``; text after the closing bracket is ignored.
    """
    if not text:
        return Pair()
    pair, _ = _parse_pair(text, 0)
    return pair


def read_numbers(stream: TextIO) -> list[Pair]:
    """Read whitespace-separated snailfish numbers from a text stream."""
    tokens: Iterable[str] = stream.read().split()
    return [parse_number(token) for token in tokens]