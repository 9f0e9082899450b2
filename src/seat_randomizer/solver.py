"""
Reservation aware seat randomizer.

Pipeline for one call:
    normalize names and reservation lines
    resolve reservations into unique keys with fixed seats
    plan seats for everyone else, keeping clear of seats next to a reservation
    shuffle the plan, merge with the reservations and check for collisions
Reservations are deterministic. Only the unreserved distribution uses the
random source, so a fixed seed reproduces the whole result.
"""
from __future__ import annotations

import logging
import random
import re
from collections import Counter
from typing import Dict, Iterable, List, Optional, Set

from .errors import (
    DuplicateSeatAssignment,
    InsufficientSeats,
    InvalidSeatCount,
    MissingSeatNumber,
    SeatOutOfRange,
)
from .models import (
    ReservationRecord,
    ReservationRequest,
    SeatingResult,
    normalize_reservation_lines,
    normalize_roster,
)

logger = logging.getLogger(__name__)

_SEAT_NUMBER = re.compile(r"[+-]?[0-9]+")


# ----------------------------- reservations -----------------------------
def parse_reservation(line: str, total_seats: int) -> ReservationRequest:
    """Parse ``name:seat`` and check the seat lies in ``[1, total_seats]``."""
    name, sep, seat_text = line.partition(":")
    name = name.strip()
    seat_text = seat_text.strip()
    if not sep or not _SEAT_NUMBER.fullmatch(seat_text):
        raise MissingSeatNumber(name)
    seat = int(seat_text)
    if seat < 1 or seat > total_seats:
        raise SeatOutOfRange(name, seat, total_seats)
    return ReservationRequest(raw_name=name, seat_number=seat)


def resolve_reservations(
    lines: Iterable[str], total_seats: int, taken_keys: Iterable[str] = ()
) -> List[ReservationRecord]:
    """Turn reservation lines into records keyed ``Name1``, ``Name2``, ...

    The counter counts earlier lines with the same name. A key that clashes
    with an earlier record or with ``taken_keys`` moves on to the next free
    counter so no reservation can overwrite another assignee.
    """
    taken: Set[str] = set(taken_keys)
    occurrences: Dict[str, int] = {}
    records: List[ReservationRecord] = []
    for line in lines:
        request = parse_reservation(line, total_seats)
        name = request.raw_name
        counter = occurrences.get(name, 0) + 1
        key = f"{name}{counter}"
        while key in taken:
            counter += 1
            key = f"{name}{counter}"
        occurrences[name] = counter
        taken.add(key)
        records.append(ReservationRecord(display_name=name, disambiguated_key=key, seat=request.seat_number))
    logger.debug("Resolved %d reservations", len(records))
    return records


def reservation_seats(records: Iterable[ReservationRecord]) -> Dict[str, int]:
    return {r.disambiguated_key: r.seat for r in records}


def reserved_display_names(records: Iterable[ReservationRecord]) -> List[str]:
    return [r.display_name for r in records]


def unassigned_students(roster: Iterable[str], records: Iterable[ReservationRecord]) -> List[str]:
    """Roster names not consumed by a reservation, roster order kept."""
    reserved = {r.display_name for r in records}
    return [name for name in roster if name not in reserved]


# ----------------------------- planning -----------------------------
def available_seats(total_seats: int, reserved: Iterable[int]) -> List[int]:
    taken = set(reserved)
    return [seat for seat in range(1, total_seats + 1) if seat not in taken]


def avoidance_seats(reserved: Iterable[int], total_seats: int) -> Set[int]:
    """Seats directly next to a reserved seat."""
    avoid: Set[int] = set()
    for seat in reserved:
        if seat > 1:
            avoid.add(seat - 1)
        if seat < total_seats:
            avoid.add(seat + 1)
    return avoid


def distribute_seats_evenly(available: List[int], count: int, reserved: List[int], total_seats: int) -> List[int]:
    """Pick ``count`` seats spread over ``available``.

    Seats away from reservations are sampled on an even stride first. Once the
    stride runs past them the picks cycle through the seats next to
    reservations. Picks are not guaranteed distinct; the caller validates.
    """
    avoid = avoidance_seats(reserved, total_seats)
    prioritized = [seat for seat in available if seat not in avoid]
    fallback = [seat for seat in available if seat in avoid]
    logger.debug(
        "Planning %d seats from %d prioritized and %d fallback seats",
        count, len(prioritized), len(fallback),
    )
    if count == 0:
        return []

    step = len(prioritized) // count or 1
    planned: List[int] = []
    for i in range(count):
        index = i * step
        if index < len(prioritized):
            planned.append(prioritized[index])
        else:
            planned.append(fallback[i % len(fallback)])
    return planned


def plan_seats(total_seats: int, reserved: List[int], count: int) -> List[int]:
    """Check capacity then return the distribution plan for ``count`` students."""
    available = available_seats(total_seats, reserved)
    if count > len(available):
        raise InsufficientSeats(required=count, available=len(available))
    return distribute_seats_evenly(available, count, reserved, total_seats)


# ----------------------------- shuffle and validate -----------------------------
def shuffle_seats(seats: List[int], rng: random.Random) -> None:
    """Fisher-Yates shuffle in place using ``rng``."""
    for i in range(len(seats) - 1, 0, -1):
        j = rng.randrange(i + 1)
        seats[i], seats[j] = seats[j], seats[i]


def find_duplicate_seats(assignment: Dict[str, int]) -> Dict[int, int]:
    counts = Counter(assignment.values())
    return {seat: n for seat, n in sorted(counts.items()) if n > 1}


def validate_assignment(assignment: Dict[str, int]) -> None:
    """Raise ``DuplicateSeatAssignment`` if any seat is used more than once."""
    duplicates = find_duplicate_seats(assignment)
    if duplicates:
        logger.warning("Rejecting assignment with duplicate seats: %s", duplicates)
        raise DuplicateSeatAssignment(duplicates)


# ----------------------------- model -----------------------------
class SeatAssigner:
    """Reservation aware seat randomizer.

    ``rng`` may be any ``random.Random`` compatible object. When omitted a new
    generator is seeded from ``seed``.
    """

    def __init__(
        self,
        total_seats: int,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        if isinstance(total_seats, bool) or not isinstance(total_seats, int) or total_seats < 1:
            raise InvalidSeatCount(total_seats)
        self.total_seats = total_seats
        self.rng = rng if rng is not None else random.Random(seed)
        # Inputs
        self.roster: List[str] = []
        self.records: List[ReservationRecord] = []
        self.unassigned: List[str] = []
        self._built = False

    def build(self, names: object, reservations: object = None) -> None:
        """Normalize the inputs and resolve reservations."""
        self.roster = normalize_roster(names)
        lines = normalize_reservation_lines(reservations)
        self.records = resolve_reservations(lines, self.total_seats, taken_keys=self.roster)
        self.unassigned = unassigned_students(self.roster, self.records)
        self._built = True

    def solve(self) -> SeatingResult:
        """Distribute, shuffle and validate seats for the built inputs."""
        if not self._built:
            raise RuntimeError("SeatAssigner.build() must be called before solve()")

        reserved = reservation_seats(self.records)
        planned = plan_seats(self.total_seats, list(reserved.values()), len(self.unassigned))
        shuffle_seats(planned, self.rng)

        assignment: Dict[str, int] = dict(reserved)
        for student, seat in zip(self.unassigned, planned):
            assignment[student] = seat
        validate_assignment(assignment)

        logger.info(
            "Assigned %d seats (%d reserved) out of %d",
            len(assignment), len(reserved), self.total_seats,
        )
        return SeatingResult(
            assignment=assignment,
            reserved_display_names=reserved_display_names(self.records),
            records=list(self.records),
            total_seats=self.total_seats,
        )


def assign_seats(
    raw_names: object,
    raw_reservations: object,
    total_seats: int,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> SeatingResult:
    """One-shot wrapper around :class:`SeatAssigner`."""
    model = SeatAssigner(total_seats, rng=rng, seed=seed)
    model.build(raw_names, raw_reservations)
    return model.solve()
