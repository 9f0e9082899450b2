"""Data models and input normalization for SeatRandomizer."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List
import math


def split_lines(value: object) -> List[str]:
    """Split newline separated text into trimmed, non-empty lines.

    ``None`` returns an empty list. ``pandas`` often provides
    ``float('nan')`` for missing values which is also treated as empty.
    An iterable of lines is accepted in place of a single string.
    """
    if value is None:
        return []
    if isinstance(value, float) and math.isnan(value):
        return []
    if isinstance(value, str):
        raw = value.split("\n")
    else:
        raw = [str(item) for item in value]  # type: ignore[union-attr]
    return [line.strip() for line in raw if line.strip()]


def normalize_roster(value: object) -> List[str]:
    """Return roster names with exact duplicates collapsed, first-seen order kept."""
    return list(dict.fromkeys(split_lines(value)))


def normalize_reservation_lines(value: object) -> List[str]:
    """Return the cleaned ``name:seat`` lines. Repeated lines are kept."""
    return split_lines(value)


@dataclass
class ReservationRequest:
    """A single parsed ``name:seat`` line."""

    raw_name: str
    seat_number: int


@dataclass
class ReservationRecord:
    """Reserved seat with a key that stays unique across repeated names."""

    display_name: str
    disambiguated_key: str
    seat: int


@dataclass
class SeatingResult:
    """Validated assignment of every assignee key to a seat."""

    assignment: Dict[str, int]
    reserved_display_names: List[str] = field(default_factory=list)
    records: List[ReservationRecord] = field(default_factory=list)
    total_seats: int = 0
