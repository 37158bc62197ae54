from __future__ import annotations

from dataclasses import FrozenInstanceError, fields, replace

import pytest

from flex_export.models import HEADER_FIELDS, FlexEntry, RentalRow


def test_rental_row_defaults_to_empty_strings():
    """Test every field of a bare RentalRow is an empty string."""
    row = RentalRow()
    assert all(getattr(row, f.name) == "" for f in fields(RentalRow))


def test_rental_row_is_immutable():
    """Test RentalRow cannot be mutated; replace() builds a new record."""
    row = RentalRow(vehicle_code="Desert Sands")
    with pytest.raises(FrozenInstanceError):
        row.vehicle_code = "DSANDS"  # type: ignore[misc]
    updated = replace(row, vehicle_code="DSANDS")
    assert updated.vehicle_code == "DSANDS"
    assert row.vehicle_code == "Desert Sands"


def test_header_fields_map_to_rental_row_fields():
    names = {f.name for f in fields(RentalRow)}
    assert set(HEADER_FIELDS.values()) <= names
    assert set(HEADER_FIELDS) == {
        "FromDay", "VehicleCode", "Price", "PickupLocationCode", "PickupDateFrom", "PickupDateTo",
    }


def test_flex_entry_label_preserves_case():
    assert FlexEntry(row_header="Peak", col_header="xB", price=10.0).label == "PeakxB"
