"""Header-versus-data decision for the first retained line.

Multi-column rows are a header as soon as any field is a non-empty,
non-numeric label.  Single-column inputs are much more ambiguous (a list of
names looks exactly like a header followed by data) so their first line is
only consumed when it is one of a handful of generic column words.
"""

import logging
from collections.abc import Sequence

from plotdata.parsing.classifiers import is_header_word, is_label
from plotdata.parsing.patterns import SYNTHETIC_HEADER_PREFIX

logger = logging.getLogger(__name__)


def synthesize_headers(column_count: int) -> tuple[str, ...]:
    """Return 'Column 1' .. 'Column N'."""
    return tuple(f"{SYNTHETIC_HEADER_PREFIX} {i + 1}" for i in range(column_count))


def _single_column_is_header(field: str, remaining_line_count: int) -> bool:
    """A lone field is a header only with data below it and a header-like word."""
    return remaining_line_count >= 1 and is_label(field) and is_header_word(field)


def infer_headers(first_row: Sequence[str], remaining_line_count: int) -> tuple[tuple[str, ...], int]:
    """Decide whether *first_row* is a header.

    Returns ``(headers, data_start_index)``: index 1 when the first row was
    consumed as the header, 0 when it is data under synthesized names.
    """
    if len(first_row) > 1:
        is_header = any(is_label(field) for field in first_row)
    else:
        is_header = _single_column_is_header(first_row[0], remaining_line_count)

    if is_header:
        logger.debug("First row is a header: %s", list(first_row))
        return tuple(first_row), 1
    logger.debug("First row is data; synthesizing %d column names", len(first_row))
    return synthesize_headers(len(first_row)), 0
