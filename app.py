"""Streamlit UI for SeatRandomizer."""
from __future__ import annotations

# Add src to sys.path so seat_randomizer can be found
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

import streamlit as st

from seat_randomizer.display import result_rows, split_columns, to_dataframe
from seat_randomizer.errors import SeatingError
from seat_randomizer.solver import assign_seats

# -----------------------------
# Sidebar options
# -----------------------------

st.sidebar.header("Options")
use_seed = st.sidebar.checkbox(
    "Reproducible shuffle",
    value=False,
    help="Use a fixed seed so the same input gives the same seats.",
)
seed = st.sidebar.number_input("Seed", min_value=0, value=0, step=1, disabled=not use_seed)
sort_by = st.sidebar.radio("Sort table by", ("name", "seat"), horizontal=True)

# -----------------------------
# Main form
# -----------------------------

st.title("Seat Randomizer")

names_text = st.text_area("Student names (one per line)", height=220)
reservations_text = st.text_area(
    "Reserved seats (name:seat, one per line)",
    height=120,
    placeholder="Alice:1\nBob:12",
)
total_seats = st.number_input("Total seats", min_value=1, value=30, step=1)

run_clicked = st.button("Assign seats", disabled=not names_text.strip(), key="assign_button")

# -----------------------------
# Assign
# -----------------------------

if run_clicked:
    try:
        result = assign_seats(
            names_text,
            reservations_text,
            int(total_seats),
            seed=int(seed) if use_seed else None,
        )
    except SeatingError as e:
        st.error(str(e))
        st.stop()

    st.subheader("Seat Assignments")
    left, right = st.columns(2)
    col_rows = split_columns(result_rows(result), 2)
    for column, rows in zip((left, right), col_rows):
        for name, seat in rows:
            column.markdown(f"**{name}** &nbsp; {seat}")

    result_df = to_dataframe(result, by=sort_by)
    st.dataframe(result_df, use_container_width=True)

    st.download_button(
        "Download assignments as CSV",
        result_df.to_csv(index=False).encode("utf-8"),
        file_name="seat_assignments.csv",
    )
