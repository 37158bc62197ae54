"""Delimited text input for exports and the flex rate grid."""

from .reader import EmptyTableError, parse_delimited_text, read_table, records_from_table

__all__ = [
    "EmptyTableError",
    "parse_delimited_text",
    "read_table",
    "records_from_table",
]
