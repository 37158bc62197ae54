from __future__ import annotations

import argparse
import sys
from pathlib import Path

from flex_export.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from flex_export.logging.init import log_summary, set_debug, setup_logging
from flex_export.services.orchestrator import ProcessingError, process_all
from flex_export.services.summary import render_file_stat_line, render_summary_line

"""CLI entrypoint.

Processes every Flexfiles*.csv in the current working directory against
Grid.csv and writes processed_*.txt beside each export.

Exit codes: errors are logged but the process exits 0 unless the config sets
``exit_nonzero_on_error: true`` (then 1). Calling batch jobs rely on the 0.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Flexfiles -> flex rate text export")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help=f"Optional YAML config (default: {DEFAULT_CONFIG_PATH})",
    )
    return p.parse_args(argv)


def _wait_for_keypress() -> None:
    """Keep a double-clicked console window open on Windows."""
    if sys.platform == "win32" and sys.stdin is not None and sys.stdin.isatty():  # pragma: no cover
        try:
            input("Press Enter to exit...")
        except EOFError:
            pass


def run(argv: list[str]) -> int:
    logger = setup_logging()
    args = _parse_args(argv)
    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    error_exit = EXIT_FATAL if cfg.exit_nonzero_on_error else EXIT_SUCCESS

    logger.info("Starting CSV processing...")
    directory = Path.cwd()
    logger.info(f"Working directory: {directory}")

    try:
        result = process_all(cfg, directory)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return error_exit
    except Exception as e:
        logger.exception(f"unexpected: {e}")
        return error_exit

    logger.info("Processing complete!")
    for stat in result.file_stats:
        logger.debug(render_file_stat_line(stat))
    log_summary(render_summary_line(result))
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    # None のときのみシステム引数を読む (テストの cli_main([]) 対策)
    if argv is None:
        argv = sys.argv[1:]
    code = run(argv)
    _wait_for_keypress()
    return code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
