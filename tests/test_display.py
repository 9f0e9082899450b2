import pathlib
import sys

import pytest

# Ensure src package is on path
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from seat_randomizer.display import (
    display_name,
    display_names,
    result_rows,
    seat_chart,
    split_columns,
    to_dataframe,
)
from seat_randomizer.models import ReservationRecord, SeatingResult


@pytest.fixture
def result():
    return SeatingResult(
        assignment={"bob": 2, "Alice1": 1, "Carol": 3, "Alice2": 5},
        reserved_display_names=["Alice", "Alice"],
        total_seats=6,
    )


def test_display_name_strips_counter_for_reserved_names():
    assert display_name("Alice1", ["Alice"]) == "Alice"
    assert display_name("Alice12", ["Alice"]) == "Alice"


def test_display_name_keeps_other_keys():
    assert display_name("Bob2", ["Alice"]) == "Bob2"
    assert display_name("Alice", ["Alice"]) == "Alice"
    assert display_name("Room 101", []) == "Room 101"


def test_result_rows_sorted_case_insensitively(result):
    assert result_rows(result) == [("Alice", 1), ("Alice", 5), ("bob", 2), ("Carol", 3)]


def test_seat_chart_lists_empty_seats(result):
    assert seat_chart(result) == [
        (1, "Alice"), (2, "bob"), (3, "Carol"), (4, ""), (5, "Alice"), (6, ""),
    ]


def test_split_columns_round_robin():
    assert split_columns([1, 2, 3, 4, 5], 2) == [[1, 3, 5], [2, 4]]
    assert split_columns([], 3) == [[], [], []]
    with pytest.raises(ValueError):
        split_columns([1], 0)


def test_to_dataframe(result):
    by_name = to_dataframe(result)
    assert list(by_name.columns) == ["name", "seat"]
    assert list(by_name["name"]) == ["Alice", "Alice", "bob", "Carol"]

    by_seat = to_dataframe(result, by="seat")
    assert list(by_seat["seat"]) == [1, 2, 3, 5]

    with pytest.raises(ValueError):
        to_dataframe(result, by="grade")


def test_records_keep_roster_names_with_digits():
    records = [ReservationRecord(display_name="Bob", disambiguated_key="Bob1", seat=1)]
    result = SeatingResult(
        assignment={"Bob1": 1, "Bob2": 3},
        reserved_display_names=["Bob"],
        records=records,
        total_seats=3,
    )
    assert display_names(result) == {"Bob1": "Bob", "Bob2": "Bob2"}
    assert result_rows(result) == [("Bob", 1), ("Bob2", 3)]
    assert seat_chart(result) == [(1, "Bob"), (2, ""), (3, "Bob2")]
