"""Command-line interface for the S3 uploader.

Provides argument parsing and the main entry point. Configuration comes
from environment variables; the command line only names the file.
"""

import argparse
import sys
from typing import Mapping, Optional

from src.config import load_from_env
from src.reporters import ConsoleReporter, Reporter
from src.uploader import UploadError, upload_file


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    # -h takes a value, so argparse's own help flag is disabled
    parser = argparse.ArgumentParser(
        prog="s3-upload",
        description="Upload a single file to an S3 bucket",
        add_help=False,
    )

    parser.add_argument(
        "-h",
        dest="show_help",
        metavar="ANY",
        default="",
        help="Show the usage",
    )

    parser.add_argument(
        "-f",
        dest="file",
        metavar="PATH",
        default="",
        help="The file to be uploaded",
    )

    return parser.parse_args(argv)


def main(
    argv: Optional[list[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    reporter: Optional[Reporter] = None,
) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        environ: Environment to read configuration from (defaults to os.environ)
        reporter: Output reporter (defaults to ConsoleReporter)

    Returns:
        Exit code: 0 for success or usage, 1 for upload errors
    """
    if reporter is None:
        reporter = ConsoleReporter()

    config = load_from_env(environ)
    if not config.is_complete:
        reporter.on_usage(config.missing_variables())
        return 0

    args = parse_args(argv)

    if args.show_help:
        reporter.on_usage([])
        return 0

    try:
        result = upload_file(config, args.file)
    except (UploadError, MemoryError) as e:
        reporter.on_error(e)
        return 1

    reporter.on_success(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
