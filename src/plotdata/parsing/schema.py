"""Pydantic models for the canonical parsed-table result and its options.

A cell is a two-variant tagged union (TextCell / NumberCell) discriminated on
``kind``, so consumers match on the variant instead of guessing a Python type.
ParsedTable is frozen: re-parsing under different options (for example a
delimiter override chosen by the user) builds a new table rather than
mutating an old one.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from plotdata.parsing.errors import UnsupportedFormatError
from plotdata.parsing.patterns import DEFAULT_COMMENT_MARKERS

# ─── Formats ──────────────────────────────────────────────────────────────────


class DeclaredFormat(str, Enum):
    """Format tag supplied by the caller, usually derived from a file extension."""

    CSV = "csv"
    JSON = "json"
    TXT = "txt"
    DAT = "dat"
    TSV = "tsv"
    TAB = "tab"
    OUT = "out"
    DATA = "data"

    @classmethod
    def from_tag(cls, tag: "str | DeclaredFormat") -> "DeclaredFormat":
        """Resolve a tag such as 'CSV', '.tsv' or 'dat'; raise UnsupportedFormatError otherwise."""
        if isinstance(tag, cls):
            return tag
        normalised = str(tag).strip().lower().lstrip(".")
        try:
            return cls(normalised)
        except ValueError as exc:
            raise UnsupportedFormatError(tag) from exc

    @property
    def is_generic_delimited(self) -> bool:
        return self not in (DeclaredFormat.CSV, DeclaredFormat.JSON)


# ─── Cells ────────────────────────────────────────────────────────────────────


class TextCell(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    value: str


class NumberCell(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: float


Cell = Annotated[Union[TextCell, NumberCell], Field(discriminator="kind")]


# ─── Parse Options ────────────────────────────────────────────────────────────


class ParseOptions(BaseModel):
    """Caller overrides: an explicit delimiter and the comment markers to strip.

    An empty ``comment_markers`` tuple disables comment filtering (blank lines
    are still dropped).
    """

    model_config = ConfigDict(frozen=True)

    delimiter: str | None = None
    comment_markers: tuple[str, ...] = DEFAULT_COMMENT_MARKERS

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, value: str | None) -> str | None:
        """A delimiter override must be exactly one character."""
        if value is not None and len(value) != 1:
            raise ValueError(f"delimiter must be a single character, got {value!r}")
        return value

    @field_validator("comment_markers")
    @classmethod
    def validate_comment_markers(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """An empty marker would match every line, so it is rejected."""
        if any(not marker for marker in value):
            raise ValueError("comment markers must be non-empty strings")
        return value


# ─── Parsed Table ─────────────────────────────────────────────────────────────


class ParsedTable(BaseModel):
    """Canonical result of one parse call.

    Rows are aligned to ``headers`` by position only.  A malformed row keeps
    its own cell count; nothing is padded or truncated.
    """

    model_config = ConfigDict(frozen=True)

    headers: tuple[str, ...]
    rows: tuple[tuple[Cell, ...], ...]
    source_name: str
    declared_format: DeclaredFormat
    row_count: int
    detected_delimiter: str | None = None

    @model_validator(mode="after")
    def validate_shape(self) -> "ParsedTable":
        """Require at least one header and a row_count that matches the rows."""
        if not self.headers:
            raise ValueError("a parsed table needs at least one header column")
        if self.row_count != len(self.rows):
            raise ValueError(f"row_count is {self.row_count} but {len(self.rows)} rows were supplied")
        return self

    def to_records(self) -> list[list[str | float]]:
        """Return the rows as plain Python values for export or charting."""
        return [[cell.value for cell in row] for row in self.rows]

    def column(self, index: int) -> list[TextCell | NumberCell]:
        """Return the cells at *index*, skipping rows too short to have one."""
        return [row[index] for row in self.rows if len(row) > index]
