from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from ..models.flex_entry import FlexEntry

"""Flex rate grid indexing and nearest-price matching.

Grid layout (Grid.csv):

    ,A,B,C          <- column labels (first cell unused)
    1,60,80,120     <- row label, then prices
    2,95,130,

Every numeric body cell becomes a FlexEntry(row label, column label, price).
The flattened list is sorted ascending by price; matching scans it in that
order so that on equal distance the cheaper (earlier) entry wins.
"""

__all__ = [
    "DEFAULT_PRICE_FACTOR",
    "FlexGridError",
    "build_flex_index",
    "find_nearest_entry",
    "flex_rate_label",
    "parse_price",
]

DEFAULT_PRICE_FACTOR = 0.75

logger = logging.getLogger(__name__)


class FlexGridError(Exception):
    """Raised when the flex rate grid cannot be used for matching."""


def parse_price(text: str | None) -> float | None:
    """Parse a price cell. Returns None unless it is a finite number."""
    if text is None:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def build_flex_index(table: Sequence[Sequence[str]]) -> list[FlexEntry]:
    """Flatten parsed grid rows into FlexEntry items sorted by price.

    Raises:
        FlexGridError: fewer than 2 rows, or no numeric cell at all
    """
    if len(table) < 2:
        raise FlexGridError("flex data is empty or invalid")

    col_headers = table[0]
    entries: list[FlexEntry] = []
    skipped = 0
    for row in table[1:]:
        row_header = row[0]
        for j in range(1, len(row)):
            price = parse_price(row[j])
            if price is None:
                skipped += 1
                continue
            col_header = col_headers[j] if j < len(col_headers) else ""
            entries.append(FlexEntry(row_header=row_header, col_header=col_header, price=price))

    if not entries:
        raise FlexGridError("flex data is empty or invalid (no numeric prices)")
    if skipped:
        logger.debug("flex grid: skipped %d non-numeric cells", skipped)

    # sorted() は安定ソート: 同額エントリは元の並び順を保持
    return sorted(entries, key=lambda e: e.price)


def find_nearest_entry(entries: Sequence[FlexEntry], target: float) -> FlexEntry:
    """Return the entry whose price is closest to ``target``.

    Linear scan over the price-sorted list; only a strictly smaller distance
    replaces the current best, so ties resolve to the earliest entry.
    """
    if not entries:
        raise ValueError("no flex entries to match against")
    best = entries[0]
    best_diff = abs(best.price - target)
    for entry in entries:
        diff = abs(entry.price - target)
        if diff < best_diff:
            best = entry
            best_diff = diff
    return best


def flex_rate_label(
    entries: Sequence[FlexEntry], price_text: str, factor: float = DEFAULT_PRICE_FACTOR
) -> str:
    """Flex rate label for a row price ("" if the price is not numeric)."""
    price = parse_price(price_text)
    if price is None:
        return ""
    return find_nearest_entry(entries, price * factor).label
