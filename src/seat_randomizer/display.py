"""Helpers that turn a :class:`SeatingResult` into display rows."""
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Sequence, Tuple, TypeVar

import pandas as pd

from .models import SeatingResult

T = TypeVar("T")

_COUNTER_SUFFIX = re.compile(r"\d+$")


def display_name(key: str, reserved_names: Iterable[str]) -> str:
    """Drop a trailing counter from ``key`` if what remains is a reserved name."""
    stripped = _COUNTER_SUFFIX.sub("", key)
    if stripped != key and stripped in set(reserved_names):
        return stripped
    return key


def display_names(result: SeatingResult) -> Dict[str, str]:
    """Map every assignee key to the name shown for it.

    Reservation keys come from ``result.records``; any other key is a roster
    name and is shown unchanged. Results without records fall back to
    stripping the counter suffix.
    """
    if not result.records:
        reserved = set(result.reserved_display_names)
        return {key: display_name(key, reserved) for key in result.assignment}
    by_key = {r.disambiguated_key: r.display_name for r in result.records}
    return {key: by_key.get(key, key) for key in result.assignment}


def result_rows(result: SeatingResult) -> List[Tuple[str, int]]:
    """Return ``(name, seat)`` pairs in alphabetical order of assignee key."""
    names = display_names(result)
    ordered = sorted(result.assignment.items(), key=lambda kv: (kv[0].casefold(), kv[0], kv[1]))
    return [(names[key], seat) for key, seat in ordered]


def seat_chart(result: SeatingResult) -> List[Tuple[int, str]]:
    """Return ``(seat, name)`` for every seat, empty seats as ``""``."""
    names = display_names(result)
    by_seat = {seat: names[key] for key, seat in result.assignment.items()}
    return [(seat, by_seat.get(seat, "")) for seat in range(1, result.total_seats + 1)]


def split_columns(rows: Sequence[T], columns: int = 2) -> List[List[T]]:
    """Deal rows round-robin into ``columns`` lists."""
    if columns < 1:
        raise ValueError("columns must be at least 1")
    out: List[List[T]] = [[] for _ in range(columns)]
    for index, row in enumerate(rows):
        out[index % columns].append(row)
    return out


def to_dataframe(result: SeatingResult, by: str = "name") -> pd.DataFrame:
    """Assignments as a ``name``/``seat`` DataFrame sorted by name or seat."""
    if by not in ("name", "seat"):
        raise ValueError(f"Unknown sort key: {by}")
    df = pd.DataFrame(result_rows(result), columns=["name", "seat"])
    if by == "seat":
        df = df.sort_values("seat", kind="stable")
    return df.reset_index(drop=True)
