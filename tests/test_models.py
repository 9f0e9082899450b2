import pathlib
import sys

# Ensure src package is on path
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from seat_randomizer.models import (
    normalize_reservation_lines,
    normalize_roster,
    split_lines,
)


def test_split_lines_trims_and_drops_blanks():
    assert split_lines("  Alice \r\n\nBob\n   \n") == ["Alice", "Bob"]


def test_split_lines_empty_values():
    assert split_lines(None) == []
    assert split_lines(float("nan")) == []
    assert split_lines("") == []


def test_split_lines_accepts_iterables():
    assert split_lines([" a ", "", "b"]) == ["a", "b"]


def test_roster_keeps_first_seen_order():
    assert normalize_roster("Carol\nAlice\nCarol\nBob\nAlice") == ["Carol", "Alice", "Bob"]


def test_roster_duplicates_are_exact_matches():
    assert normalize_roster("alice\nAlice") == ["alice", "Alice"]


def test_reservation_lines_keep_repeats():
    assert normalize_reservation_lines("Alice:1\n\n Alice:1 ") == ["Alice:1", "Alice:1"]


def test_split_lines_only_breaks_on_newlines():
    assert split_lines("Ann\x0cLee\r\nBo\u2028b\n") == ["Ann\x0cLee", "Bo\u2028b"]
