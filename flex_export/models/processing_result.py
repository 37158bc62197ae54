from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

"""Processing result models for the flex rate export tool.

Aggregates per-file statistics into the batch result used for the SUMMARY
output line.
"""


@dataclass(frozen=True)
class FileStat:
    """Per-file processing statistics."""
    file_name: str  # primary export file name
    output_path: Path  # processed_*.txt written beside the input
    input_rows: int  # data rows parsed from the export
    written_rows: int  # rows left after filtering
    flex_entries: int  # priced grid cells available for matching
    elapsed_seconds: float


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results for one batch run."""
    processed_files: int
    total_written_rows: int
    elapsed_seconds: float
    file_stats: list[FileStat] = field(default_factory=list)
