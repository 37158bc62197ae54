"""Domain models for the flex rate export tool.

This package contains the immutable records passed between pipeline stages.
"""

from .flex_entry import FlexEntry
from .processing_result import FileStat, ProcessingResult
from .rental_row import HEADER_FIELDS, RentalRow

__all__ = [
    # Pipeline records
    "FlexEntry",
    "RentalRow",
    "HEADER_FIELDS",
    # Result models
    "FileStat",
    "ProcessingResult",
]
