import io

import pytest

from aockit.diagnostic import (
    ENTRY_SIZE,
    DiagnosticLog,
    entry_value,
    flipped_entry_value,
    least_common_bits,
    most_common_bits,
    parse_entry,
)
from aockit.errors import InputError

SAMPLE = "000000000001\n111111111110\n101010101010\n"


def test_parse_entry_reads_bits():
    entry = parse_entry("100000000001")
    assert entry[0] is True
    assert entry[-1] is True
    assert not any(entry[1:-1])


def test_parse_entry_wrong_length_raises():
    with pytest.raises(InputError):
        parse_entry("0101")


def test_parse_entry_bad_character_raises():
    with pytest.raises(InputError):
        parse_entry("00000000000x")


@pytest.mark.parametrize("number", [0, 1, 22, 1234, 4095])
def test_entry_value_round_trip(number):
    assert entry_value(parse_entry(format(number, f"0{ENTRY_SIZE}b"))) == number


@pytest.mark.parametrize("text", ["000000000001", "101010101010", "111111111111"])
def test_value_and_flipped_value_are_complementary(text):
    entry = parse_entry(text)
    assert entry_value(entry) + flipped_entry_value(entry) == 2**ENTRY_SIZE - 1


def test_from_stream_reads_all_entries():
    log = DiagnosticLog.from_stream(io.StringIO(SAMPLE))
    assert len(log) == 3
    assert list(log)[1] == parse_entry("111111111110")


def test_from_stream_empty():
    log = DiagnosticLog.from_stream(io.StringIO(""))
    assert len(log) == 0


def test_from_stream_invalid_line_raises():
    with pytest.raises(InputError):
        DiagnosticLog.from_stream(io.StringIO("000000000001\n0110\n"))


def test_single_entry_is_its_own_most_common():
    entry = parse_entry("101100111000")
    assert most_common_bits([entry]) == entry


def test_least_common_is_complement_of_most_common():
    log = DiagnosticLog.from_stream(io.StringIO(SAMPLE))
    most = log.most_frequent_bits()
    least = log.least_frequent_bits()
    assert tuple(not bit for bit in most) == least


def test_ties_favour_one_for_most_and_zero_for_least():
    entries = [parse_entry("000000000000"), parse_entry("111111111111")]
    assert most_common_bits(entries) == (True,) * ENTRY_SIZE
    assert least_common_bits(entries) == (False,) * ENTRY_SIZE


def test_majority_wins():
    log = DiagnosticLog.from_stream(io.StringIO(SAMPLE))
    assert log.most_frequent_bits() == parse_entry("101010101010")