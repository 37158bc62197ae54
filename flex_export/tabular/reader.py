from __future__ import annotations

import logging
from pathlib import Path

from ..models.rental_row import HEADER_FIELDS, RentalRow

"""Comma-delimited text reader.

The exports are plain comma separated text without quoting: a comma inside a
value is indistinguishable from a delimiter. This is a known limitation of the
export format and is not worked around here.

- CRLF / CR line endings are collapsed to LF before splitting
- lines that are blank after trimming are dropped
- every cell is trimmed
"""

__all__ = [
    "EmptyTableError",
    "parse_delimited_text",
    "read_table",
    "records_from_table",
]

DELIMITER = ","

logger = logging.getLogger(__name__)


class EmptyTableError(Exception):
    """Raised when a primary export has no header row."""


def parse_delimited_text(text: str) -> list[list[str]]:
    """Split raw text into rows of trimmed string cells."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return [
        [cell.strip() for cell in line.split(DELIMITER)]
        for line in text.split("\n")
        if line.strip()
    ]


def read_table(path: Path) -> list[list[str]]:
    """Read and parse a delimited text file.

    utf-8-sig so that a BOM written by spreadsheet tools does not end up in
    the first header name.
    """
    text = path.read_text(encoding="utf-8-sig")
    logger.debug("read %s (%d bytes)", path.name, len(text))
    return parse_delimited_text(text)


def records_from_table(table: list[list[str]], source: str = "<table>") -> list[RentalRow]:
    """Map parsed rows onto RentalRow records using the first row as header.

    Known headers missing from the file default to "" (reported once as a
    warning). Unknown headers are ignored. Short lines get "" for the cells
    they lack; extra trailing cells beyond the header are dropped.
    """
    if not table:
        raise EmptyTableError(f"{source}: file is empty (no header row)")

    header = table[0]
    missing = [name for name in HEADER_FIELDS if name not in header]
    if missing:
        logger.warning("%s missing columns: %s", source, missing)
    unknown = [name for name in header if name not in HEADER_FIELDS]
    if unknown:
        logger.debug("%s ignoring columns: %s", source, unknown)

    # 同名ヘッダが重複する場合は後の列で上書き
    positions: dict[str, int] = {}
    for idx, name in enumerate(header):
        field_name = HEADER_FIELDS.get(name)
        if field_name is not None:
            positions[field_name] = idx

    records: list[RentalRow] = []
    for line in table[1:]:
        values = {
            field_name: (line[idx] if idx < len(line) else "")
            for field_name, idx in positions.items()
        }
        records.append(RentalRow(**values))
    return records
