from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from ..models.rental_row import RentalRow
from .dates import format_date, parse_date

"""Output document building and rendering.

Document layout (one row per line, cells comma-joined, no trailing newline):

    "FIRST-BOOK-DATE","<earliest pickup-from MM/DD/YYYY>"
    "<location>","<vehicle>","","<from>","<to>","<flex rate>","<availability>"
    ...
    END OF FILE

Every cell is double quoted except the terminal marker.
"""

__all__ = [
    "END_MARKER",
    "FIRST_BOOK_DATE",
    "build_document",
    "output_path_for",
    "render_document",
    "sort_rows",
    "write_document",
]

FIRST_BOOK_DATE = "FIRST-BOOK-DATE"
END_MARKER = "END OF FILE"
LINE_SEPARATOR = "\n"


def sort_rows(rows: Sequence[RentalRow]) -> list[RentalRow]:
    """Sort by (pickup-to, pickup-from) as calendar dates.

    Dates are parsed from the original export text. Rows with unparseable
    dates go last; equal keys keep their input order.
    """
    if not rows:
        return []
    frame = pd.DataFrame({
        "pos": range(len(rows)),
        "date_to": pd.to_datetime([parse_date(r.pickup_date_to) for r in rows]),
        "date_from": pd.to_datetime([parse_date(r.pickup_date_from) for r in rows]),
    })
    # pos を最後のキーに入れて同値時の入力順を保証
    ordered = frame.sort_values(["date_to", "date_from", "pos"], na_position="last")
    return [rows[i] for i in ordered["pos"].tolist()]


def build_document(rows: Sequence[RentalRow]) -> list[list[str]]:
    """Sort rows and lay out the sentinel, data and terminal rows."""
    ordered = sort_rows(rows)
    earliest = ordered[0].pickup_date_from if ordered else ""
    document: list[list[str]] = [[FIRST_BOOK_DATE, format_date(earliest)]]
    for row in ordered:
        document.append([
            row.pickup_location_code,
            row.vehicle_code,
            row.vehicle_desc,
            format_date(row.pickup_date_from),
            format_date(row.pickup_date_to),
            row.flex_rate,
            row.availability,
        ])
    document.append([END_MARKER])
    return document


def _render_cell(cell: str) -> str:
    if cell == END_MARKER:
        return cell
    return f'"{cell}"'


def render_document(document: Sequence[Sequence[str]]) -> str:
    return LINE_SEPARATOR.join(
        ",".join(_render_cell(cell) for cell in row) for row in document
    )


def output_path_for(input_path: Path, prefix: str = "processed_", suffix: str = ".txt") -> Path:
    """processed_<stem>.txt in the input's directory."""
    return input_path.parent / f"{prefix}{input_path.stem}{suffix}"


def write_document(document: Sequence[Sequence[str]], path: Path) -> Path:
    # newline="" : 改行コード変換なし (プラットフォーム間でバイト一致)
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(render_document(document))
    return path
