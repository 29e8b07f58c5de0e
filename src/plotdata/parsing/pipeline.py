"""Single entry point: raw text plus a declared format to a ParsedTable.

Routing:
  json                     -- strict JSON, no comment filtering or delimiter detection
  csv                      -- comment filter, comma/semicolon detector, tokenizer
  txt/dat/tsv/tab/out/data -- comment filter, override or format default or
                              six-candidate detector, tokenizer

Delimited paths then run header inference and per-cell coercion.  The
engine performs no I/O and keeps no state between calls.
"""

import logging
from typing import Any

from plotdata.parsing.coercion import coerce_row
from plotdata.parsing.comments import filter_comment_lines, split_lines
from plotdata.parsing.delimiters import detect_csv_delimiter, detect_delimiter
from plotdata.parsing.errors import EmptyInputError, InvalidEncodingError, NoDataAfterFilteringError
from plotdata.parsing.headers import infer_headers
from plotdata.parsing.json_tables import json_to_table, load_json_document
from plotdata.parsing.patterns import SAMPLE_LINE_COUNT
from plotdata.parsing.schema import DeclaredFormat, ParsedTable, ParseOptions
from plotdata.parsing.tokenizer import tokenize_line

logger = logging.getLogger(__name__)

# Used only when the caller gives no override
FORMAT_DEFAULT_DELIMITERS = {DeclaredFormat.TSV: "\t"}

BOM = "\ufeff"


# ─── Input Normalisation ─────────────────────────────────────────────────────


def decode_text(raw: str | bytes, source_name: str | None = None) -> str:
    """Decode bytes as UTF-8 and drop a leading byte-order mark."""
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidEncodingError(source_name=source_name) from exc
    return raw[1:] if raw.startswith(BOM) else raw


def _coerce_options(options: ParseOptions | dict[str, Any] | None) -> ParseOptions:
    if options is None:
        return ParseOptions()
    if isinstance(options, ParseOptions):
        return options
    return ParseOptions(**options)


# ─── Delimited Paths ─────────────────────────────────────────────────────────


def _retained_lines(text: str, options: ParseOptions, source_name: str) -> list[str]:
    lines = filter_comment_lines(split_lines(text), options.comment_markers)
    if not lines:
        raise NoDataAfterFilteringError(source_name=source_name)
    return lines


def _resolve_delimiter(lines: list[str], declared: DeclaredFormat, options: ParseOptions) -> str:
    first_line, sample = lines[0], lines[1 : 1 + SAMPLE_LINE_COUNT]
    if declared is DeclaredFormat.CSV:
        return detect_csv_delimiter(first_line, sample)
    override = options.delimiter if options.delimiter is not None else FORMAT_DEFAULT_DELIMITERS.get(declared)
    return detect_delimiter(first_line, sample, override=override)


def _split_table(lines: list[str], delimiter: str) -> tuple[tuple[str, ...], list[tuple]]:
    """Tokenize every retained line with one delimiter and separate the header."""
    first_row = tokenize_line(lines[0], delimiter)
    headers, data_start = infer_headers(first_row, len(lines) - 1)
    rows = [coerce_row(first_row)] if data_start == 0 else []
    rows.extend(coerce_row(tokenize_line(line, delimiter)) for line in lines[1:])
    return headers, rows


# ─── Entry Point ─────────────────────────────────────────────────────────────


def parse_table(
    source_name: str,
    raw_text: str | bytes,
    declared_format: DeclaredFormat | str,
    options: ParseOptions | dict[str, Any] | None = None,
) -> ParsedTable:
    """Parse *raw_text* as *declared_format* into a new ParsedTable.

    Raises a TableParseError subclass for an unknown format, empty input,
    input with no lines left after comment filtering, malformed JSON or a
    JSON shape that is not tabular.
    """
    declared = DeclaredFormat.from_tag(declared_format)
    options = _coerce_options(options)
    text = decode_text(raw_text, source_name)
    if not text.strip():
        raise EmptyInputError(source_name=source_name)

    delimiter: str | None = None
    if declared is DeclaredFormat.JSON:
        headers, rows = json_to_table(load_json_document(text, source_name), source_name)
    else:
        lines = _retained_lines(text, options, source_name)
        delimiter = _resolve_delimiter(lines, declared, options)
        headers, rows = _split_table(lines, delimiter)

    table = ParsedTable(
        headers=headers,
        rows=tuple(rows),
        source_name=source_name,
        declared_format=declared,
        row_count=len(rows),
        detected_delimiter=delimiter,
    )
    logger.info(
        "Parsed %s as %s: delimiter=%r, %d columns, %d rows",
        source_name,
        declared.value,
        delimiter,
        len(headers),
        table.row_count,
    )
    return table
