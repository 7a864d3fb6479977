"""Small string helpers: splitting, stripping and joining."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .errors import InvalidArgumentError


class SplitBehaviour(Enum):
    """How :func:`split` treats empty pieces."""

    NONE = "none"
    DROP_EMPTY = "drop_empty"


def _split_on_char(text: str, delimiter: str, drop_empty: bool) -> list[str]:
    result: list[str] = []
    begin = 0
    length = len(text)
    while True:
        if drop_empty:
            while begin < length and text[begin] == delimiter:
                begin += 1
        if begin == length:
            break
        pos = text.find(delimiter, begin)
        if pos == -1:
            result.append(text[begin:])
            break
        result.append(text[begin:pos])
        begin = pos + 1
    return result


def _split_on_string(text: str, delimiter: str, drop_empty: bool) -> list[str]:
    pieces = text.split(delimiter)
    if drop_empty:
        return [piece for piece in pieces if piece]
    return pieces


def split(text: str, delimiter: str, behaviour: SplitBehaviour = SplitBehaviour.NONE) -> list[str]:
    """Split ``text`` on ``delimiter``.

    A single-character delimiter yields no piece for a trailing delimiter;
    a longer delimiter keeps a trailing empty piece. With
    ``SplitBehaviour.DROP_EMPTY`` no empty pieces are returned.
    """
    if not delimiter:
        raise InvalidArgumentError("Cannot split on an empty delimiter")
    drop_empty = behaviour is SplitBehaviour.DROP_EMPTY
    if len(delimiter) == 1:
        return _split_on_char(text, delimiter, drop_empty)
    return _split_on_string(text, delimiter, drop_empty)


def strip(text: str) -> str:
    """Return ``text`` without leading and trailing whitespace."""
    return text.strip()


def join(strings: Iterable[str], delimiter: str) -> str:
    """Join ``strings`` with ``delimiter`` between each pair."""
    return delimiter.join(strings)