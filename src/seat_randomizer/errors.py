"""Error kinds raised by the seat assignment engine.

Every error is a ``ValueError`` so callers that only care about bad input can
catch that, while the attributes carry what a front end needs to explain the
problem.
"""
from __future__ import annotations

from typing import Dict


class SeatingError(ValueError):
    """Base class for all seat assignment failures."""


class InvalidSeatCount(SeatingError):
    def __init__(self, total_seats: object) -> None:
        self.total_seats = total_seats
        super().__init__(f"Total seats must be a positive integer, got {total_seats!r}.")


class MissingSeatNumber(SeatingError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"{name}'s name is in the reserved seat list but no seat was specified."
        )


class SeatOutOfRange(SeatingError):
    def __init__(self, name: str, seat: int, total_seats: int) -> None:
        self.name = name
        self.seat = seat
        self.total_seats = total_seats
        super().__init__(
            f'Invalid seat assignment: "{name}" is assigned to seat {seat}, '
            f"but there are only {total_seats} seats available."
        )


class InsufficientSeats(SeatingError):
    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough seats for all students: {required} students need seats "
            f"but only {available} are free."
        )


class DuplicateSeatAssignment(SeatingError):
    """Raised when the merged assignment puts two keys on one seat.

    ``duplicates`` maps each offending seat to how many keys landed on it.
    """

    def __init__(self, duplicates: Dict[int, int]) -> None:
        self.duplicates = dict(sorted(duplicates.items()))
        detail = ", ".join(f"seat {seat} x{count}" for seat, count in self.duplicates.items())
        super().__init__(f"Duplicate seat assignment detected: {detail}")
