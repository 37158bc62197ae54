from __future__ import annotations

from dataclasses import dataclass

"""RentalRow model for the flex rate export tool.

A RentalRow is one data line of a Flexfiles export after the header row has
been mapped onto typed fields. Pipeline stages never mutate a row; they build
a new one with ``dataclasses.replace``.
"""

__all__ = [
    "HEADER_FIELDS",
    "RentalRow",
]

# Export header name -> RentalRow field
HEADER_FIELDS: dict[str, str] = {
    "PickupLocationCode": "pickup_location_code",
    "VehicleCode": "vehicle_code",
    "PickupDateFrom": "pickup_date_from",
    "PickupDateTo": "pickup_date_to",
    "Price": "price",
    "FromDay": "from_day",
}


@dataclass(frozen=True)
class RentalRow:
    """Single pricing row of a Flexfiles export.

    Raw fields keep the export's text verbatim (trimmed). The derived fields
    are filled in by the row normalizer.
    """
    pickup_location_code: str = ""
    vehicle_code: str = ""
    pickup_date_from: str = ""  # raw text, DD/MM/YYYY or ISO
    pickup_date_to: str = ""
    price: str = ""  # raw text, parsed only when matching
    from_day: str = ""
    # Derived columns
    vehicle_desc: str = ""
    flex_rate: str = ""
    availability: str = ""
