"""Cave systems made of tunnels, and the routes from ``start`` to ``end``."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import IntFlag
from typing import Optional, TextIO

from .errors import InputError, InvalidArgumentError, OutOfRangeError
from .strings import join, split

Cave = str
Tunnel = tuple[str, str]
Route = list[str]

START = "start"
END = "end"


def route_as_string(route: Iterable[Cave]) -> str:
    """Render a route as comma-separated cave names."""
    return join(route, ",")


def is_singly_visitable(cave: Cave) -> bool:
    """Small caves (lower case) and the terminal caves may be entered once only."""
    if cave in (START, END):
        return True
    return all("a" <= char <= "z" or char == "_" for char in cave)


class TerminalCaveType(IntFlag):
    """Which terminal caves a tunnel touches."""

    NONE = 0
    START = 1
    END = 2

    @property
    def cave_name(self) -> str:
        if self is TerminalCaveType.START:
            return START
        if self is TerminalCaveType.END:
            return END
        raise InvalidArgumentError("Invalid terminal cave type")

    @classmethod
    def of_tunnel(cls, tunnel: Tunnel) -> "TerminalCaveType":
        """Classify a tunnel by the terminal caves at its ends."""
        kind = cls.NONE
        if START in tunnel:
            kind |= cls.START
        if END in tunnel:
            kind |= cls.END
        return kind


class CaveMap:
    """Directed graph of caves; tunnels keep the order they were added in."""

    def __init__(self) -> None:
        self._exits: dict[Cave, list[Cave]] = {}

    def add_cave(self, name: Cave) -> bool:
        """Add a cave; return whether it was new."""
        if name in self._exits:
            return False
        self._exits[name] = []
        return True

    def add_tunnel(self, source: Cave, target: Cave) -> None:
        """Add a one-way tunnel, adding either cave if it is missing."""
        self.add_cave(source)
        self.add_cave(target)
        self._exits[source].append(target)

    def __getitem__(self, name: Cave) -> Cave:
        if name not in self._exits:
            raise OutOfRangeError(f"No cave named {name}")
        return name

    def __contains__(self, name: object) -> bool:
        return name in self._exits

    def caves(self) -> list[Cave]:
        """All caves in the order they were added."""
        return list(self._exits)

    def neighbours(self, cave: Cave) -> tuple[Cave, ...]:
        """Caves reachable through the tunnels leaving ``cave``."""
        try:
            return tuple(self._exits[cave])
        except KeyError:
            raise OutOfRangeError(f"No cave named {cave}") from None

    def edges(self) -> Iterator[Tunnel]:
        """Every tunnel as ``(source, target)``, grouped by source cave."""
        for source, targets in self._exits.items():
            for target in targets:
                yield source, target

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._exits.values())

    def copy(self) -> "CaveMap":
        out = CaveMap()
        out._exits = {cave: list(targets) for cave, targets in self._exits.items()}
        return out


@dataclass
class TunnelPartition:
    """Tunnels grouped by the terminal cave they touch."""

    starts: list[Tunnel]
    ends: list[Tunnel]
    others: list[Tunnel]


def _partition(items: list[Tunnel], first: int, last: int, predicate) -> int:
    """Move items matching ``predicate`` to the front of ``items[first:last]``.

    Works by swapping from both ends; returns the index where the
    non-matching items begin.
    """
    while True:
        while True:
            if first == last:
                return first
            if not predicate(items[first]):
                break
            first += 1
        while True:
            last -= 1
            if first == last:
                return first
            if predicate(items[last]):
                break
        items[first], items[last] = items[last], items[first]
        first += 1


class CaveMapBuilder:
    """Adds tunnels to a :class:`CaveMap`, honouring the terminal caves."""

    def __init__(self, cave_map: CaveMap) -> None:
        self._cave_map = cave_map

    def handle_terminal_cave(self, kind: TerminalCaveType, tunnels: Iterable[Tunnel]) -> "CaveMapBuilder":
        """Add tunnels leaving ``start`` or entering ``end``, depending on ``kind``."""
        if kind not in (TerminalCaveType.START, TerminalCaveType.END):
            raise InvalidArgumentError("Invalid terminal cave type")
        terminal = kind.cave_name
        self._cave_map.add_cave(terminal)
        for first, second in tunnels:
            name = second if first == terminal else first
            self._cave_map.add_cave(name)
            if kind is TerminalCaveType.START:
                self._cave_map.add_tunnel(terminal, name)
            else:
                self._cave_map.add_tunnel(name, terminal)
        return self

    def add_non_terminal_tunnels(self, tunnels: Iterable[Tunnel]) -> "CaveMapBuilder":
        """Add tunnels that can be walked both ways."""
        for first, second in tunnels:
            self._cave_map.add_tunnel(first, second)
            self._cave_map.add_tunnel(second, first)
        return self

    @staticmethod
    def partition_tunnels(tunnels: Iterable[Tunnel]) -> TunnelPartition:
        """Split tunnels into those touching ``start``, ``end`` and neither."""
        items = [tuple(tunnel) for tunnel in tunnels]
        end_of_starts = _partition(
            items, 0, len(items),
            lambda t: bool(TerminalCaveType.of_tunnel(t) & TerminalCaveType.START),
        )
        end_of_ends = _partition(
            items, end_of_starts, len(items),
            lambda t: bool(TerminalCaveType.of_tunnel(t) & TerminalCaveType.END),
        )
        return TunnelPartition(
            starts=items[:end_of_starts],
            ends=items[end_of_starts:end_of_ends],
            others=items[end_of_ends:],
        )


@dataclass
class _Breadcrumb:
    cave: Cave
    explored: int = 0


class RouteIterator:
    """Walks depth-first through every route from ``start`` to ``end``.

    An iterator built without caves, or one that has run out of routes,
    compares equal to ``RouteIterator()``.
    """

    def __init__(self, caves: Optional[CaveMap] = None) -> None:
        self._caves = caves
        self._route: list[_Breadcrumb] = []
        self._visited: set[Cave] = set()
        if caves is not None:
            self._enter(START)
            self._search()

    def current(self) -> Route:
        """The route the iterator is on."""
        if not self._route:
            raise OutOfRangeError("Route iterator is at end")
        return [crumb.cave for crumb in self._route]

    def advance(self) -> "RouteIterator":
        """Move on to the next route."""
        if self._route:
            self._leave()
            self._search()
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteIterator):
            return NotImplemented
        return self._route == other._route

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> "RouteIterator":
        return self

    def __next__(self) -> Route:
        if not self._route:
            raise StopIteration
        route = self.current()
        self.advance()
        return route

    def _enter(self, cave: Cave) -> None:
        self._route.append(_Breadcrumb(cave))
        if cave != END and is_singly_visitable(cave):
            self._visited.add(cave)

    def _leave(self) -> None:
        crumb = self._route.pop()
        self._visited.discard(crumb.cave)

    def _search(self) -> None:
        assert self._caves is not None or not self._route
        while self._route:
            crumb = self._route[-1]
            if crumb.cave == END:
                return
            exits = self._caves.neighbours(crumb.cave)
            if crumb.explored < len(exits):
                next_cave = exits[crumb.explored]
                crumb.explored += 1
                if next_cave not in self._visited:
                    self._enter(next_cave)
            else:
                self._leave()


class CaveRoutes:
    """Iterable over every route through a cave map."""

    def __init__(self, caves: CaveMap) -> None:
        self._caves = caves

    def __iter__(self) -> Iterator[Route]:
        return RouteIterator(self._caves)


def load_caves(stream: TextIO) -> CaveMap:
    """Read ``a-b`` tunnel lines from a stream and build the cave map.

    Every line must hold a tunnel; an empty final line (such as one left by
    a trailing newline) is an error.
    """
    content = stream.read()
    lines = content.split("\n")
    if lines[-1] == "":
        raise InputError("Failed to read edge from file")
    tunnels = []
    for line in lines:
        caves = split(line, "-")
        if len(caves) != 2:
            raise InputError(f"Invalid tunnel line: {line}")
        tunnels.append((caves[0], caves[1]))

    partitions = CaveMapBuilder.partition_tunnels(tunnels)
    cave_map = CaveMap()
    (
        CaveMapBuilder(cave_map)
        .handle_terminal_cave(TerminalCaveType.START, partitions.starts)
        .handle_terminal_cave(TerminalCaveType.END, partitions.ends)
        .add_non_terminal_tunnels(partitions.others)
    )
    return cave_map


class CaveRevisitor:
    """Finds routes in which one small cave may be visited twice."""

    def __init__(self, caves: CaveMap) -> None:
        self._caves = caves

    def routes(self) -> list[Route]:
        """All distinct routes, sorted."""
        all_routes = {tuple(route) for route in RouteIterator(self._caves)}
        for cave in self.find_doubly_visitable_caves():
            all_routes.update(self._routes_with_doubly_visitable_cave(cave))
        return [list(route) for route in sorted(all_routes)]

    def find_doubly_visitable_caves(self) -> list[Cave]:
        """Small caves other than ``start`` and ``end``."""
        return [
            cave
            for cave in self._caves.caves()
            if is_singly_visitable(cave) and cave not in (START, END)
        ]

    def _routes_with_doubly_visitable_cave(self, cave: Cave) -> Iterator[tuple[Cave, ...]]:
        amended = self._with_dual_cave(cave)
        for route in RouteIterator(amended):
            yield tuple(name.replace("_", "") for name in route)

    def _with_dual_cave(self, cave: Cave) -> CaveMap:
        out = self._caves.copy()
        dual = cave + "_"
        out.add_cave(dual)
        for source, target in self._caves.edges():
            if source == cave:
                out.add_tunnel(dual, target)
            elif target == cave:
                out.add_tunnel(source, dual)
        return out