"""Reduction and addition of snailfish numbers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from .snailfish_number import ChildPosition, Pair

_SIDES = (ChildPosition.LEFT, ChildPosition.RIGHT)
_EXPLODE_DEPTH = 4
_SPLIT_LIMIT = 9


def _find_explodable(pair: Pair, depth: int, position: Optional[ChildPosition]) -> Optional[Pair]:
    """Left-most pair nested inside four pairs, deepest first."""
    for side in _SIDES:
        child = pair.child(side)
        if isinstance(child, Pair):
            found = _find_explodable(child, depth + 1, side)
            if found is not None:
                return found
    if depth >= _EXPLODE_DEPTH and position is not None:
        return pair
    return None


def _half_explode(to_explode: Pair, side: ChildPosition) -> None:
    """Add one half of an exploding pair to the nearest regular number on ``side``."""
    position = to_explode.position()
    predecessor = to_explode.parent()
    while predecessor is not None and position is side:
        position = predecessor.position()
        predecessor = predecessor.parent()
    if predecessor is None:
        return

    holder = predecessor
    holder_side = side
    child = holder.child(holder_side)
    while isinstance(child, Pair):
        holder = child
        holder_side = side.complement()
        child = holder.child(holder_side)
    holder.set_child(holder_side, child + to_explode.child(side))


def explode(number: Pair) -> bool:
    """Explode the first pair nested too deeply; return whether one exploded."""
    to_explode = _find_explodable(number, 0, None)
    if to_explode is None:
        return False
    _half_explode(to_explode, ChildPosition.LEFT)
    _half_explode(to_explode, ChildPosition.RIGHT)
    parent = to_explode.parent()
    position = to_explode.position()
    assert parent is not None and position is not None
    parent.set_child(position, 0)
    return True


def _find_splittable(pair: Pair) -> Optional[tuple[Pair, ChildPosition]]:
    for side in _SIDES:
        child = pair.child(side)
        if isinstance(child, Pair):
            found = _find_splittable(child)
            if found is not None:
                return found
        elif child > _SPLIT_LIMIT:
            return pair, side
    return None


def split(number: Pair) -> bool:
    """Split the left-most regular number above nine; return whether one split."""
    found = _find_splittable(number)
    if found is None:
        return False
    holder, side = found
    value = holder.child(side)
    half = value // 2
    holder.set_child(side, Pair(half, value - half))
    return True


def reduce_number(number: Pair) -> Pair:
    """Explode and split until nothing changes; the number is changed in place."""
    while explode(number) or split(number):
        pass
    return number


def add(left: Pair, right: Pair) -> Pair:
    """Sum of two snailfish numbers, reduced; the operands are left untouched.

    ``[0,0]`` acts as the empty number: adding it gives the other operand.
    """
    empty = Pair()
    if right == empty:
        return left.copy()
    if left == empty:
        return right.copy()
    return reduce_number(Pair(left.copy(), right.copy()))


def total(numbers: Iterable[Pair]) -> Pair:
    """Add a sequence of snailfish numbers in order; an empty one gives ``[0,0]``."""
    result = Pair()
    for number in numbers:
        result = add(result, number)
    return result