"""Submarine diagnostic log of fixed-width binary entries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO

from .errors import InputError

ENTRY_SIZE = 12

Entry = tuple[bool, ...]


def parse_entry(text: str) -> Entry:
    """Parse one log line of ``ENTRY_SIZE`` binary digits."""
    text = text.strip()
    if len(text) != ENTRY_SIZE:
        raise InputError(f"Invalid log line: {text}")
    bits = []
    for char in text:
        if char == "0":
            bits.append(False)
        elif char == "1":
            bits.append(True)
        else:
            raise InputError(f"Invalid character in log line: {char}")
    return tuple(bits)


def _bit_balance(entries: Iterable[Entry]) -> list[int]:
    counts = [0] * ENTRY_SIZE
    for entry in entries:
        counts = [count + (1 if bit else -1) for count, bit in zip(counts, entry)]
    return counts


def most_common_bits(entries: Iterable[Entry]) -> Entry:
    """Most common bit in each position; ties count as 1."""
    return tuple(count >= 0 for count in _bit_balance(entries))


def least_common_bits(entries: Iterable[Entry]) -> Entry:
    """Least common bit in each position; ties count as 0."""
    return tuple(count < 0 for count in _bit_balance(entries))


def entry_value(entry: Iterable[bool]) -> int:
    """Read an entry as an unsigned binary number, most significant bit first."""
    value = 0
    for bit in entry:
        value = (value << 1) | int(bool(bit))
    return value


def flipped_entry_value(entry: Iterable[bool]) -> int:
    """Read an entry with every bit inverted as an unsigned binary number."""
    return entry_value(not bit for bit in entry)


class DiagnosticLog:
    """An ordered collection of diagnostic entries."""

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._entries = [tuple(entry) for entry in entries]

    @classmethod
    def from_stream(cls, stream: TextIO) -> "DiagnosticLog":
        """Read whitespace-separated entries from a text stream."""
        return cls(parse_entry(token) for token in stream.read().split())

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def most_frequent_bits(self) -> Entry:
        return most_common_bits(self._entries)

    def least_frequent_bits(self) -> Entry:
        return least_common_bits(self._entries)