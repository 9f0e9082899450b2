"""Roster and reservation file loading utilities."""
from __future__ import annotations

from pathlib import Path
from typing import IO, Any, List, Optional, Tuple

import pandas as pd

from .models import normalize_reservation_lines, normalize_roster, split_lines


def _is_csv(source: Path | str | IO[Any]) -> bool:
    name = source if isinstance(source, (str, Path)) else getattr(source, "name", "")
    return str(name).lower().endswith(".csv")


def _read_text(source: Path | str | IO[Any]) -> str:
    if isinstance(source, (str, Path)):
        return Path(source).read_text(encoding="utf-8")
    data = source.read()
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    return data


def _cell(value: object) -> str:
    lines = split_lines(value)
    return lines[0] if lines else ""


def load_roster(source: Path | str | IO[Any]) -> List[str]:
    """Load student names, one per line or from the ``name`` column of a CSV."""
    if not _is_csv(source):
        return normalize_roster(_read_text(source))

    df = pd.read_csv(source, dtype=str, keep_default_na=False)
    column = "name" if "name" in df.columns else df.columns[0]
    return normalize_roster([_cell(v) for v in df[column]])


def load_reservations(source: Path | str | IO[Any]) -> List[str]:
    """Load ``name:seat`` lines.

    CSV files need ``name`` and ``seat`` columns. A blank seat cell becomes a
    bare name so that resolving it reports the missing seat.
    """
    if not _is_csv(source):
        return normalize_reservation_lines(_read_text(source))

    df = pd.read_csv(source, dtype=str, keep_default_na=False)
    missing = [c for c in ("name", "seat") if c not in df.columns]
    if missing:
        label = getattr(source, "name", source)
        raise ValueError(f"Reservations file {label} is missing columns: {', '.join(missing)}")

    lines: List[str] = []
    for _, row in df.iterrows():
        name = _cell(row["name"])
        seat = _cell(row["seat"])
        if not name and not seat:
            continue
        lines.append(f"{name}:{seat}" if seat else name)
    return normalize_reservation_lines(lines)


def load_all(
    names_path: Path | str | IO[Any], reservations_path: Optional[Path | str | IO[Any]] = None
) -> Tuple[List[str], List[str]]:
    """Convenience wrapper returning roster names and reservation lines."""
    roster = load_roster(names_path)
    reservations = load_reservations(reservations_path) if reservations_path is not None else []
    return roster, reservations
