"""Parse a delimited text or JSON file and print what was inferred.

Prints a JSON summary: declared format, detected delimiter, headers, row
count and the first few records.  Defaults come from PLOTDATA_* environment
variables (see plotdata.config); command-line flags override them.

Usage:
  python scripts/parse_table.py data/sample.dat
  python scripts/parse_table.py data/export.txt --delimiter tab --head 10
  python scripts/parse_table.py data/notes.csv --comment-markers "##" "!"
"""

import argparse
import json
import logging
import sys

from plotdata.config import options_from_env, parse_delimiter_arg
from plotdata.loaders import parse_file
from plotdata.parsing import ParseOptions, TableParseError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for this script."""
    parser = argparse.ArgumentParser(description="Infer delimiter, headers and cell types of a tabular file.")
    parser.add_argument("path", help="File to parse (.csv, .json, .txt, .dat, .tsv, .tab, .out, .data).")
    parser.add_argument("--format", dest="declared_format", help="Declared format; defaults to the file extension.")
    parser.add_argument("--delimiter", help="Delimiter override (e.g. '|', 'tab', 'space', 'auto').")
    parser.add_argument("--comment-markers", nargs="+", help="Comment prefixes to strip (default: # %% //).")
    parser.add_argument("--no-comments", action="store_true", help="Disable comment filtering.")
    parser.add_argument("--head", type=int, default=5, help="Number of records to print.")
    parser.add_argument("--verbose", action="store_true", help="Log detector scores.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI; return the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    options = options_from_env()
    overrides: dict = {}
    if args.delimiter is not None:
        overrides["delimiter"] = parse_delimiter_arg(args.delimiter)
    if args.no_comments:
        overrides["comment_markers"] = ()
    elif args.comment_markers:
        overrides["comment_markers"] = tuple(args.comment_markers)
    if overrides:
        options = ParseOptions(**{**options.model_dump(), **overrides})

    try:
        table = parse_file(args.path, options, declared_format=args.declared_format)
    except TableParseError as exc:
        logger.error("%s", exc)
        return 1

    summary = {
        "source": table.source_name,
        "format": table.declared_format.value,
        "delimiter": table.detected_delimiter,
        "headers": list(table.headers),
        "row_count": table.row_count,
        "records": table.to_records()[: args.head],
    }
    json.dump(summary, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
