"""SeatRandomizer package."""
from .models import ReservationRecord, ReservationRequest, SeatingResult
from .errors import (
    SeatingError,
    InvalidSeatCount,
    MissingSeatNumber,
    SeatOutOfRange,
    InsufficientSeats,
    DuplicateSeatAssignment,
)
from .text_loader import load_roster, load_reservations, load_all
from .solver import SeatAssigner, assign_seats

__all__ = [
    "ReservationRecord",
    "ReservationRequest",
    "SeatingResult",
    "SeatingError",
    "InvalidSeatCount",
    "MissingSeatNumber",
    "SeatOutOfRange",
    "InsufficientSeats",
    "DuplicateSeatAssignment",
    "load_roster",
    "load_reservations",
    "load_all",
    "SeatAssigner",
    "assign_seats",
]
