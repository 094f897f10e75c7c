import argparse
import logging
import sys
from typing import List, Optional

from filefinder.core.config.settings import settings
from ..domain.errors import PathError
from .api import find_files

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_PATH = 2

def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {number}")
    return number

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filefinder",
        description="List files with a given extension that are larger than a given size."
    )
    parser.add_argument("root", nargs="?", default=".", help="Directory to scan (default: current directory)")
    parser.add_argument("--ext", default=settings.DEFAULT_EXTENSION, help="File extension to match, without the dot")
    parser.add_argument(
        "--min-size-mb", type=non_negative_int, default=settings.DEFAULT_MIN_SIZE_MB,
        help="Only report files strictly larger than this many MB"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log scan progress to stderr")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else settings.LOG_LEVEL,
        format=settings.LOG_FORMAT
    )

    try:
        with find_files(args.root, args.ext, args.min_size_mb) as rows:
            for row in rows:
                print(row)
    except PathError as e:
        logger.error(f"Scan aborted: {e}")
        return EXIT_BAD_PATH

    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
