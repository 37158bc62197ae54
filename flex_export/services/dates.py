from __future__ import annotations

import logging
from datetime import date

import pandas as pd

"""Pickup date parsing and MM/DD/YYYY formatting.

Input convention of the exports:
- text containing "/" is DD/MM/YYYY (day first, even though the output is
  month first)
- anything else goes through pandas' generic date parsing (ISO dates etc.)

Unparseable or impossible dates degrade to "" / None instead of failing the
file.
"""

__all__ = [
    "format_date",
    "parse_date",
]

logger = logging.getLogger(__name__)


def _parse_day_first(text: str) -> date | None:
    parts = text.split("/")
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(p.strip()) for p in parts)
        # 2 桁年 ("24") は世紀が決まらないので無効扱い
        if year < 1000:
            return None
        return date(year, month, day)
    except ValueError:
        return None


def parse_date(text: str | None) -> date | None:
    """Parse a pickup date. Returns None for empty or invalid input."""
    if not text:
        return None
    text = text.strip()
    if "/" in text:
        return _parse_day_first(text)
    # numeric dates only: pandas maps "today" / "now" to the current date
    if not text[:1].isdigit():
        return None
    ts = pd.to_datetime(text, errors="coerce")
    if pd.isna(ts):
        return None
    return date(ts.year, ts.month, ts.day)


def format_date(text: str | None) -> str:
    """Format a pickup date as MM/DD/YYYY ("" when empty or invalid)."""
    if not text:
        logger.debug("empty date string received")
        return ""
    parsed = parse_date(text)
    if parsed is None:
        logger.warning("invalid date received: %r", text)
        return ""
    # strftime の %Y は 4 桁未満の年をゼロ埋めしない環境がある
    return f"{parsed.month:02d}/{parsed.day:02d}/{parsed.year:04d}"
