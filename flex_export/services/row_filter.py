from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from dataclasses import replace

from ..models.flex_entry import FlexEntry
from ..models.rental_row import RentalRow
from .flex_grid import DEFAULT_PRICE_FACTOR, flex_rate_label

"""Row filtering and normalization for Flexfiles exports.

Each step returns new RentalRow records; input order is preserved (the
writer sorts later).

1. drop rows whose FromDay or VehicleCode is excluded
2. rewrite long vehicle names to their booking codes (exact match only)
3. add VehicleDesc (""), FlexRate (nearest grid price) and Availability
"""

__all__ = [
    "DEFAULT_AVAILABILITY",
    "DEFAULT_EXCLUDED_FROM_DAYS",
    "DEFAULT_EXCLUDED_VEHICLE_CODES",
    "DEFAULT_VEHICLE_CODE_REWRITES",
    "annotate_rows",
    "filter_rows",
    "normalize_rows",
    "rewrite_vehicle_codes",
]

DEFAULT_EXCLUDED_FROM_DAYS: frozenset[str] = frozenset({"0", "1", "7", "14", "21", "29"})

DEFAULT_EXCLUDED_VEHICLE_CODES: frozenset[str] = frozenset({
    "Aventus 2-seater (AT)",
    "Mystery Machine 2",
    "Mystery Machine 2 Hightop",
    "Mystery Machine 3",
    "Budget Mini-Camper",
    "Grip 4x4",
})

DEFAULT_VEHICLE_CODE_REWRITES: dict[str, str] = {
    "D5AWD Adventure Camper": "D5",
    "Desert Sands": "DSANDS",
    "Johnny Feelgood": "JFG",
}

DEFAULT_AVAILABILITY = "RQ"


def filter_rows(
    rows: Sequence[RentalRow],
    excluded_from_days: Collection[str] = DEFAULT_EXCLUDED_FROM_DAYS,
    excluded_vehicle_codes: Collection[str] = DEFAULT_EXCLUDED_VEHICLE_CODES,
) -> list[RentalRow]:
    return [
        row for row in rows
        if row.from_day not in excluded_from_days
        and row.vehicle_code not in excluded_vehicle_codes
    ]


def rewrite_vehicle_codes(
    rows: Sequence[RentalRow],
    rewrites: Mapping[str, str] = DEFAULT_VEHICLE_CODE_REWRITES,
) -> list[RentalRow]:
    return [
        replace(row, vehicle_code=rewrites[row.vehicle_code]) if row.vehicle_code in rewrites else row
        for row in rows
    ]


def annotate_rows(
    rows: Sequence[RentalRow],
    entries: Sequence[FlexEntry],
    price_factor: float = DEFAULT_PRICE_FACTOR,
    availability: str = DEFAULT_AVAILABILITY,
) -> list[RentalRow]:
    """Attach the derived output columns to every row."""
    return [
        replace(
            row,
            vehicle_desc="",
            flex_rate=flex_rate_label(entries, row.price, price_factor),
            availability=availability,
        )
        for row in rows
    ]


def normalize_rows(
    rows: Sequence[RentalRow],
    entries: Sequence[FlexEntry],
    *,
    excluded_from_days: Collection[str] = DEFAULT_EXCLUDED_FROM_DAYS,
    excluded_vehicle_codes: Collection[str] = DEFAULT_EXCLUDED_VEHICLE_CODES,
    rewrites: Mapping[str, str] = DEFAULT_VEHICLE_CODE_REWRITES,
    price_factor: float = DEFAULT_PRICE_FACTOR,
    availability: str = DEFAULT_AVAILABILITY,
) -> list[RentalRow]:
    """Run filter -> vehicle code rewrite -> annotation."""
    kept = filter_rows(rows, excluded_from_days, excluded_vehicle_codes)
    rewritten = rewrite_vehicle_codes(kept, rewrites)
    return annotate_rows(rewritten, entries, price_factor, availability)
