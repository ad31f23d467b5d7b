"""
Command-line argument parsing for Polyglot Site.

Every path option is resolved against ``--site-dir`` so a build can be started
from anywhere. Validation errors end the process with status 1.
"""

import argparse
import sys
from pathlib import Path
from typing import NamedTuple

from ..core.version import get_version


class PathValidationError(Exception):
    """Raised when a path validation fails."""

    pass


class ParsedArgs(NamedTuple):
    """Container for parsed command-line arguments."""

    site_dir: Path
    config_file: Path
    output_folder: Path
    log_folder: Path
    verbose: bool


class DefaultPaths:
    """Default paths for Polyglot Site, relative to the site directory."""

    SITE_DIR: Path = Path(".")
    CONFIG_FILE: Path = Path("site.yml")
    OUTPUT_FOLDER: Path = Path("public")
    LOG_FOLDER: Path = Path("logs")


def validate_config_file_path(config_file_str: str, site_dir: Path) -> Path:
    """
    Resolve the site configuration file.

    Relative paths are resolved against the site directory. The file itself
    must exist.

    Raises:
        PathValidationError: If the configuration file path is invalid
    """
    try:
        config_file = Path(config_file_str).expanduser()
        if not config_file.is_absolute():
            config_file = site_dir / config_file
        config_file = config_file.resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Cannot resolve config file {config_file_str!r}: {e}") from e

    if config_file.exists() and config_file.is_dir():
        raise PathValidationError(
            f"Config file is a directory, not a file: {config_file}"
        )

    if not config_file.exists():
        raise PathValidationError(f"Config file does not exist: {config_file}")

    return config_file


def validate_folder_path(path_str: str, folder_name: str, site_dir: Path | None = None) -> Path:
    """
    Resolve a folder option to an absolute path.

    Args:
        path_str: Value given on the command line
        folder_name: Human-readable option name used in errors
        site_dir: Base for relative paths (defaults to the working directory)

    Returns:
        The absolute path; the folder itself may not exist yet

    Raises:
        PathValidationError: If the path names an existing file
    """
    try:
        path = Path(path_str).expanduser()
        if site_dir is not None and not path.is_absolute():
            path = site_dir / path
        path = path.resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Cannot resolve {folder_name} {path_str!r}: {e}") from e

    if path.exists() and not path.is_dir():
        raise PathValidationError(
            f"{folder_name.capitalize()} is a file, expected a directory: {path}"
        )

    return path


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for Polyglot Site.

    Returns:
        The parser; ``--version`` reports the installed package version
    """
    parser = argparse.ArgumentParser(
        prog="polyglot-site",
        description="Polyglot Site - build the localized page set of a static site",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  polyglot-site
    Build the site in the current directory using site.yml

  polyglot-site --site-dir ~/sites/docs --output-folder /tmp/docs-build
    Build another site and write the page manifest elsewhere
""",
    )

    defaults = DefaultPaths()

    _ = parser.add_argument(
        "--site-dir",
        type=str,
        default=str(defaults.SITE_DIR),
        help="Site root; content, locale and relative paths resolve against it (default: %(default)s)",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--config-file",
        type=str,
        default=str(defaults.CONFIG_FILE),
        help="Path to the site configuration file (default: %(default)s)",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--output-folder",
        type=str,
        default=str(defaults.OUTPUT_FOLDER),
        help=(
            "Folder receiving pages.json and webpack.config.json (default: %(default)s). "
            "The directory will be created if it doesn't exist."
        ),
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--log-folder",
        type=str,
        default=str(defaults.LOG_FOLDER),
        help=(
            "Path to the log folder (default: %(default)s). "
            "The directory will be created if it doesn't exist."
        ),
        metavar="PATH",
    )

    _ = parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to the console",
    )

    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """
    Parse and validate the build options.

    Args:
        args: Arguments to parse; None means the process arguments

    Returns:
        Absolute, validated paths

    Raises:
        SystemExit: If argument parsing or path validation fails
    """
    parser = create_argument_parser()
    parsed = parser.parse_args(args)

    try:
        site_dir_str: str = getattr(parsed, "site_dir", "")
        config_file_str: str = getattr(parsed, "config_file", "")
        output_folder_str: str = getattr(parsed, "output_folder", "")
        log_folder_str: str = getattr(parsed, "log_folder", "")
        verbose: bool = getattr(parsed, "verbose", False)

        site_dir = validate_folder_path(site_dir_str, "site directory")
        if not site_dir.exists():
            raise PathValidationError(f"Site directory does not exist: {site_dir}")
        config_file = validate_config_file_path(config_file_str, site_dir)
        output_folder = validate_folder_path(output_folder_str, "output folder", site_dir)
        log_folder = validate_folder_path(log_folder_str, "log folder", site_dir)
    except PathValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    return ParsedArgs(
        site_dir=site_dir,
        config_file=config_file,
        output_folder=output_folder,
        log_folder=log_folder,
        verbose=verbose,
    )


def ensure_directories_exist(parsed_args: ParsedArgs) -> None:
    """
    Ensure that the output and log directories exist.

    Raises:
        OSError: If directory creation fails
    """
    parsed_args.output_folder.mkdir(parents=True, exist_ok=True)
    parsed_args.log_folder.mkdir(parents=True, exist_ok=True)


def get_parsed_args(args: list[str] | None = None) -> ParsedArgs:
    """Parse arguments and ensure directories exist."""
    parsed_args = parse_arguments(args)
    ensure_directories_exist(parsed_args)
    return parsed_args
