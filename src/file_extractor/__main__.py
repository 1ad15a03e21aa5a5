"""CLI entry-point for file_extractor.

Usage:
    python -m file_extractor [-d DIR] [-o FILE] [-ie EXTS] [-ee EXTS]
                             [-id DIRS] [-ed DIRS] [-ms BYTES] [-fs] [-v]
                             [-c CONFIG.yaml]
    python -m file_extractor --version
"""

from __future__ import annotations

import argparse
import logging
import sys

from file_extractor import __version__
from file_extractor.core.config import (
    DEFAULT_MAX_FILE_SIZE,
    ConfigError,
    config_from_options,
    load_config_file,
)
from file_extractor.core.engine import ExtractionError, run_extraction
from file_extractor.utils.exit_codes import ExitCode

_EXAMPLES = """\
EXAMPLES:
  %(prog)s -d ./src -o output.txt -ie '.go,.md' -ed 'vendor,.git'
  %(prog)s --include-ext '.py,.js' --exclude-dir 'node_modules,__pycache__'
  %(prog)s --max-size 5242880 --verbose
  %(prog)s --config extract.yaml -o report.txt
"""


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="file-extractor",
        description=f"File Content Extractor v{__version__}",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    p.add_argument(
        "--version", "-version",
        action="version",
        version=f"File Content Extractor v{__version__}",
    )
    p.add_argument("-d", "--dir", "-dir", default=None, help="Input directory to scan (default: .)")
    p.add_argument(
        "-o", "--output", "-output", default=None,
        help="Output file name (default: extracted_content_TIMESTAMP.txt)",
    )
    p.add_argument(
        "-ie", "--include-ext", "-include-ext", default=None,
        help="Comma-separated list of file extensions to include (e.g. '.go,.txt,.md')",
    )
    p.add_argument(
        "-ee", "--exclude-ext", "-exclude-ext", default=None,
        help="Comma-separated list of file extensions to exclude (e.g. '.exe,.bin,.jpg')",
    )
    p.add_argument(
        "-id", "--include-dir", "-include-dir", default=None,
        help="Comma-separated list of directory names to include",
    )
    p.add_argument(
        "-ed", "--exclude-dir", "-exclude-dir", default=None,
        help="Comma-separated list of directory names to exclude (e.g. 'node_modules,.git,vendor')",
    )
    p.add_argument(
        "-ms", "--max-size", "-max-size", type=int, default=None,
        help=f"Maximum file size in bytes (default: {DEFAULT_MAX_FILE_SIZE})",
    )
    p.add_argument(
        "-fs", "--follow-symlinks", "-follow-symlinks", action="store_true", default=None,
        help="Follow symbolic links",
    )
    p.add_argument("-v", "--verbose", "-verbose", action="store_true", default=None, help="Verbose output")
    p.add_argument(
        "-c", "--config", default=None,
        help="YAML file with default option values; command-line flags win",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        file_values = load_config_file(args.config) if args.config else {}
        cfg = config_from_options(
            file_values,
            root=args.dir,
            output=args.output,
            include_ext=args.include_ext,
            exclude_ext=args.exclude_ext,
            include_dir=args.include_dir,
            exclude_dir=args.exclude_dir,
            max_size=args.max_size,
            follow_symlinks=args.follow_symlinks,
            verbose=args.verbose,
        )
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    logging.basicConfig(
        level=logging.INFO if cfg.verbose else logging.WARNING,
        format="%(message)s",
    )

    if cfg.verbose:
        print(f"Starting extraction from: {cfg.root}")
        print(f"Output file: {cfg.output}")

    try:
        result = run_extraction(cfg)
    except ExtractionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    if cfg.verbose:
        print(f"Files processed: {result.files_processed}")
        print("Extraction completed successfully!")
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
