from __future__ import annotations

from ..models.processing_result import FileStat, ProcessingResult

"""SUMMARY line rendering.

Format (the "SUMMARY" label itself is added by log_summary):
files={processed} rows={written rows} elapsed_sec={elapsed}

Per-file detail lines (DEBUG):
file={name} input_rows={n} written_rows={n} flex_entries={n} elapsed_sec={s} output={path}
"""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # Format very small numbers to avoid scientific notation
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: ProcessingResult) -> str:
    """Render the SUMMARY body for a batch result.

    Examples:
        >>> result = ProcessingResult(processed_files=2, total_written_rows=14, elapsed_seconds=2.0)
        >>> render_summary_line(result)
        'files=2 rows=14 elapsed_sec=2'
    """
    return (
        f"files={result.processed_files} "
        f"rows={result.total_written_rows} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )


def render_file_stat_line(stat: FileStat) -> str:
    return (
        f"file={stat.file_name} "
        f"input_rows={stat.input_rows} "
        f"written_rows={stat.written_rows} "
        f"flex_entries={stat.flex_entries} "
        f"elapsed_sec={_format_seconds(stat.elapsed_seconds)} "
        f"output={stat.output_path}"
    )
