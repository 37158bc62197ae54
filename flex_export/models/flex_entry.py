from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "FlexEntry",
]


@dataclass(frozen=True)
class FlexEntry:
    """One priced cell of the flex rate grid.

    ``row_header + col_header`` is the flex rate label written to the output.
    """
    row_header: str
    col_header: str
    price: float

    @property
    def label(self) -> str:
        return f"{self.row_header}{self.col_header}"
