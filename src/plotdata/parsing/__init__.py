"""Parsing and schema inference for delimited text and JSON tables.

Submodules:
  patterns     -- compiled regex patterns and constant tuples
  classifiers  -- numeric / label / header-word predicates for one field
  schema       -- ParsedTable, cell variants and ParseOptions (Pydantic)
  errors       -- TableParseError hierarchy
  comments     -- blank and comment line removal
  tokenizer    -- quote-aware line splitting
  delimiters   -- CSV and general delimiter detectors
  headers      -- header-versus-data inference
  coercion     -- per-cell numeric coercion
  json_tables  -- JSON documents to headers and rows
  pipeline     -- parse_table() entry point
"""

from plotdata.parsing.errors import (
    EmptyInputError,
    InvalidEncodingError,
    InvalidJsonError,
    NoDataAfterFilteringError,
    TableParseError,
    UnsupportedFormatError,
    UnsupportedJsonShapeError,
)
from plotdata.parsing.pipeline import parse_table
from plotdata.parsing.schema import Cell, DeclaredFormat, NumberCell, ParsedTable, ParseOptions, TextCell

__all__ = [
    "Cell",
    "DeclaredFormat",
    "EmptyInputError",
    "InvalidEncodingError",
    "InvalidJsonError",
    "NoDataAfterFilteringError",
    "NumberCell",
    "ParseOptions",
    "ParsedTable",
    "TableParseError",
    "TextCell",
    "UnsupportedFormatError",
    "UnsupportedJsonShapeError",
    "parse_table",
]
