from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import ExportConfig
from ..models.processing_result import FileStat, ProcessingResult
from ..tabular.reader import read_table, records_from_table
from .flex_grid import build_flex_index
from .progress import ProgressTracker
from .row_filter import normalize_rows
from .writer import build_document, output_path_for, write_document

"""Batch orchestration for the flex rate export.

1. Locate the grid file and the primary exports in the working directory
2. Process each export to completion (read, normalize, match, write)
3. Aggregate per-file statistics into a ProcessingResult

Failure policy:
- discovery problems (no grid, no exports) abort before any file is touched
- any error inside one export aborts that file AND the rest of the batch;
  outputs already written are kept
- per-cell problems (bad price, bad date, non-numeric grid cell) never
  raise, they degrade to empty values
"""

logger = logging.getLogger(__name__)


class ProcessingError(Exception):
    """Base exception for processing errors."""


class FileProcessingError(ProcessingError):
    """An export file failed; the batch stops at this file."""

    def __init__(self, file_path: Path, cause: Exception) -> None:
        super().__init__(f"error processing {file_path.name}: {cause}")
        self.file_path = file_path
        self.cause = cause


def find_grid_file(directory: Path, config: ExportConfig) -> Path:
    grid = directory / config.grid_file
    if not grid.is_file():
        raise ProcessingError(f"{config.grid_file} not found in {directory}")
    return grid


def scan_export_files(directory: Path, config: ExportConfig) -> list[Path]:
    """Scan directory for primary exports (non-recursive, sorted by name).

    Raises:
        ProcessingError: directory unreadable or no matching file
    """
    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")
    try:
        files = sorted(
            p for p in directory.iterdir()
            if p.is_file()
            and p.name.startswith(config.input_prefix)
            and p.name.endswith(config.input_suffix)
        )
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e
    if not files:
        raise ProcessingError(
            f"No files starting with '{config.input_prefix}' found in {directory}"
        )
    return files


def process_file(input_path: Path, grid_path: Path, config: ExportConfig) -> FileStat:
    """Run the whole pipeline for one export and write its output file.

    Exceptions propagate unchanged (EmptyTableError, FlexGridError, OSError...).
    """
    start = datetime.now(UTC)

    logger.info("Reading input file: %s", input_path.name)
    rows = records_from_table(read_table(input_path), source=input_path.name)
    logger.info("Parsed input rows: %d", len(rows))

    logger.info("Reading flex file: %s", grid_path.name)
    entries = build_flex_index(read_table(grid_path))
    logger.info("Processed flex entries: %d", len(entries))

    normalized = normalize_rows(
        rows,
        entries,
        excluded_from_days=config.excluded_from_days,
        excluded_vehicle_codes=config.excluded_vehicle_codes,
        rewrites=config.vehicle_code_rewrites,
        price_factor=config.price_factor,
        availability=config.availability_code,
    )
    logger.info("Filtered rows: %d", len(normalized))

    document = build_document(normalized)
    out_path = output_path_for(input_path, config.output_prefix, config.output_suffix)
    write_document(document, out_path)
    logger.info("Successfully saved output file: %s", out_path)

    elapsed = (datetime.now(UTC) - start).total_seconds()
    return FileStat(
        file_name=input_path.name,
        output_path=out_path,
        input_rows=len(rows),
        written_rows=len(normalized),
        flex_entries=len(entries),
        elapsed_seconds=elapsed,
    )


def process_all(config: ExportConfig, directory: Path) -> ProcessingResult:
    """Process every export in ``directory``.

    Raises:
        ProcessingError: discovery failure
        FileProcessingError: first export that failed (remaining ones skipped)
    """
    start = datetime.now(UTC)

    grid_path = find_grid_file(directory, config)
    logger.info("Found %s", grid_path.name)
    export_files = scan_export_files(directory, config)
    logger.info("Found %d %s files to process", len(export_files), config.input_prefix)

    file_stats: list[FileStat] = []
    with ProgressTracker(len(export_files), description="Processing files") as progress:
        for file_path in export_files:
            progress.start_file(file_path)
            logger.info("Processing %s...", file_path.name)
            try:
                stat = process_file(file_path, grid_path, config)
            except Exception as e:
                raise FileProcessingError(file_path, e) from e
            file_stats.append(stat)
            progress.finish_file(rows=stat.written_rows)

    return ProcessingResult(
        processed_files=len(file_stats),
        total_written_rows=sum(s.written_rows for s in file_stats),
        elapsed_seconds=(datetime.now(UTC) - start).total_seconds(),
        file_stats=file_stats,
    )
