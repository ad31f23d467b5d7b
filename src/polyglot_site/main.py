"""
Main entry point for Polyglot Site.

This module parses arguments, sets up logging, loads configuration, runs one
build pass and writes the build output. Any failure aborts the build.
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path

from .build.orchestrator import SiteBuild
from .build.output import write_build_output
from .config.manager import ConfigManager
from .utils.cli.args import get_parsed_args
from .utils.core.exceptions import ConfigurationError, SiteBuildError

LOG_FILES = ["polyglot-site.log", "polyglot-site-errors.log"]


def rotate_logs_on_startup(logs_dir: Path) -> None:
    """
    Move the previous run's log files aside under a timestamped name.

    Args:
        logs_dir: The build log folder
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    for log_file in LOG_FILES:
        log_path = logs_dir / log_file
        if log_path.exists():
            backup_path = logs_dir / f"{log_file}.{timestamp}"
            try:
                _ = log_path.rename(backup_path)
            except OSError as e:
                print(f"Warning: Failed to rotate {log_file}: {e}", file=sys.stderr)


def cleanup_old_logs(logs_dir: Path, max_files: int = 10) -> None:
    """
    Delete rotated log files beyond the newest ``max_files`` of each log.

    Args:
        logs_dir: The build log folder
        max_files: Rotated copies kept per log
    """
    for log_type in LOG_FILES:
        timestamped_files = [
            file_path
            for file_path in logs_dir.glob(f"{log_type}.*")
            if file_path.name != log_type
        ]

        # Newest first
        timestamped_files.sort(key=lambda x: x.stat().st_mtime, reverse=True)

        for file_path in timestamped_files[max_files:]:
            try:
                file_path.unlink()
            except OSError as e:
                print(f"Warning: Failed to remove {file_path.name}: {e}", file=sys.stderr)


def setup_logging(logs_dir: Path, verbose: bool = False) -> None:
    """
    Configure file and console logging with rotation.

    Args:
        logs_dir: Directory receiving the log files
        verbose: Log debug output to the console
    """
    _ = logs_dir.mkdir(exist_ok=True, parents=True)

    rotate_logs_on_startup(logs_dir)
    cleanup_old_logs(logs_dir, max_files=10)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
    )
    simple_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    # 5MB max, keep 5 backups
    file_handler = logging.handlers.RotatingFileHandler(
        logs_dir / LOG_FILES[0],
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(simple_formatter)

    error_handler = logging.handlers.RotatingFileHandler(
        logs_dir / LOG_FILES[1],
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(detailed_formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(error_handler)

    # Noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


async def main(args: list[str] | None = None) -> int:
    """
    Run one build pass.

    Returns:
        Process exit code
    """
    parsed_args = get_parsed_args(args)

    setup_logging(parsed_args.log_folder, parsed_args.verbose)
    logger.info("Polyglot Site build starting...")

    config_manager = ConfigManager()
    try:
        config = config_manager.load_and_set(parsed_args.config_file)
        logger.info("Configuration loaded and validated successfully")
    except ConfigurationError as e:
        logger.error(f"Failed to load configuration: {e}")
        logger.error(f"Please check {parsed_args.config_file} for errors")
        return 1

    site_build = SiteBuild(config, base_dir=parsed_args.site_dir)
    try:
        result = await site_build.run()
        _ = write_build_output(result, parsed_args.output_folder)
    except SiteBuildError as e:
        logger.error(f"Build failed ({e.category.value}): {e}")
        return 1
    except OSError as e:
        logger.exception(f"Build failed writing output: {e}")
        return 1

    logger.info("Build finished")
    return 0
