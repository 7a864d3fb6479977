"""Transparent paper marked with dots, and the folds applied to it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from .errors import InputError
from .strings import SplitBehaviour, split

Point = tuple[int, int]


class FoldDirection(Enum):
    """The axis a fold line runs across."""

    X = "x"
    Y = "y"


@dataclass(frozen=True)
class Fold:
    """Fold along ``direction=value``."""

    direction: FoldDirection
    value: int


def _parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise InputError(f"Invalid number: {text!r}") from None


def parse_point(text: str) -> Point:
    """Parse an ``x,y`` pair."""
    parts = split(text.strip(), ",")
    if len(parts) != 2:
        raise InputError(f"Invalid point: {text!r}")
    return _parse_int(parts[0]), _parse_int(parts[1])


def parse_fold(text: str) -> Fold:
    """Parse a ``fold along x=N`` or ``fold along y=N`` line."""
    if not text:
        raise InputError("Failed to load fold from string")
    details = split(split(text, " ")[-1], "=", SplitBehaviour.DROP_EMPTY)
    if len(details) != 2:
        raise InputError("Invalid fold specification in string")
    value = _parse_int(details[0 + 1])
    axis = details[0][0]
    if axis == "x":
        return Fold(FoldDirection.X, value)
    if axis == "y":
        return Fold(FoldDirection.Y, value)
    raise InputError("Invalid fold direction")


class Paper:
    """A set of marked points."""

    def __init__(self, marks: Iterable[Point] = ()) -> None:
        self._marks: set[Point] = {tuple(mark) for mark in marks}

    @classmethod
    def load(cls, stream: TextIO) -> "Paper":
        """Read ``x,y`` lines up to the first blank line."""
        paper = cls()
        while True:
            line = stream.readline()
            if not line:
                break
            line = line.rstrip("\r\n")
            if not line:
                break
            paper.mark(parse_point(line))
        return paper

    def mark(self, point: Point) -> None:
        self._marks.add(tuple(point))

    def erase(self, point: Point) -> None:
        self._marks.discard(tuple(point))

    def read(self, point: Point) -> bool:
        return tuple(point) in self._marks

    def __len__(self) -> int:
        return len(self._marks)

    def __iter__(self) -> Iterator[Point]:
        return iter(sorted(self._marks))

    def __contains__(self, point: object) -> bool:
        return point in self._marks

    def as_matrix(self) -> list[list[int]]:
        """Rows of 0/1 cells; one spare column follows the rightmost mark."""
        if not self._marks:
            return []
        width = max(x for x, _ in self._marks) + 2
        height = max(y for _, y in self._marks) + 1
        matrix = [[0] * width for _ in range(height)]
        for x, y in self._marks:
            matrix[y][x] = 1
        return matrix


class FoldSequence:
    """An ordered list of folds."""

    def __init__(self, folds: Iterable[Fold] = ()) -> None:
        self._folds = list(folds)

    @classmethod
    def load(cls, stream: TextIO) -> "FoldSequence":
        """Read fold lines to the end of the stream, skipping blank lines."""
        folds = []
        for line in stream.read().splitlines():
            if line:
                folds.append(parse_fold(line))
        return cls(folds)

    def __iter__(self) -> Iterator[Fold]:
        return iter(self._folds)

    def __len__(self) -> int:
        return len(self._folds)


def apply_fold(paper: Paper, fold: Fold) -> Paper:
    """Return a new paper with the marks beyond the fold line reflected onto it."""
    result = Paper()
    for x, y in paper:
        if fold.direction is FoldDirection.X and x > fold.value:
            x = 2 * fold.value - x
        elif fold.direction is FoldDirection.Y and y > fold.value:
            y = 2 * fold.value - y
        result.mark((x, y))
    return result


class PaperFolder:
    """Applies a sequence of folds to a sheet of paper."""

    def __init__(self, paper: Paper) -> None:
        self._paper = paper

    def apply(self, folds: Iterable[Fold]) -> Paper:
        paper = self._paper
        for fold in folds:
            paper = apply_fold(paper, fold)
        return paper