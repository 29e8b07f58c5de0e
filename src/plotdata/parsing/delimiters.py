"""Delimiter detection by consistency scoring.

Both detectors score a candidate as ``count_in_first_line * 10 + consistent``
where ``consistent`` is the number of sample lines (at most five, following
the first line) that reproduce the first line's count.  A delimiter that is
frequent in the header but irregular across rows (because it also appears in
free text) loses to a rarer one that recurs at a stable count.  Ties go to
the earlier candidate.
"""

import logging
from collections.abc import Callable, Sequence

from plotdata.parsing.patterns import CSV_CANDIDATES, FALLBACK_DELIMITER, GENERAL_CANDIDATES, SAMPLE_LINE_COUNT

logger = logging.getLogger(__name__)


def _consistency(sample_lines: Sequence[str], expected: int, count: Callable[[str], int]) -> int:
    """Count sample lines for which *count(line)* equals *expected*."""
    return sum(1 for line in sample_lines[:SAMPLE_LINE_COUNT] if count(line) == expected)


# ─── CSV Detector ────────────────────────────────────────────────────────────


def detect_csv_delimiter(first_line: str, sample_lines: Sequence[str]) -> str:
    """Choose between comma and semicolon for CSV input by occurrence counts.

    A candidate absent from the first line is disqualified.  Falls back to a
    comma when neither appears.
    """
    best = FALLBACK_DELIMITER
    best_score = -1
    for candidate in CSV_CANDIDATES:
        occurrences = first_line.count(candidate)
        if occurrences == 0:
            continue
        consistent = _consistency(sample_lines, occurrences, lambda line, c=candidate: line.count(c))
        score = occurrences * 10 + consistent
        logger.debug("CSV candidate %r: %d occurrences, %d consistent, score %d", candidate, occurrences, consistent, score)
        if score > best_score:
            best, best_score = candidate, score
    return best


# ─── General Detector ────────────────────────────────────────────────────────


def detect_delimiter(
    first_line: str,
    sample_lines: Sequence[str],
    override: str | None = None,
    candidates: Sequence[str] = GENERAL_CANDIDATES,
) -> str:
    """Choose the delimiter for generic delimited text.

    An explicit *override* is returned as-is without scoring.  Otherwise a
    candidate qualifies only if it splits the first line into more than one
    field; the field counts are plain splits, quotes are not considered here.
    Falls back to a comma when nothing qualifies.
    """
    if override is not None:
        logger.debug("Delimiter override %r, skipping detection", override)
        return override

    best = FALLBACK_DELIMITER
    best_score = -1
    for candidate in candidates:
        field_count = len(first_line.split(candidate))
        if field_count <= 1:
            continue
        consistent = _consistency(sample_lines, field_count, lambda line, c=candidate: len(line.split(c)))
        score = field_count * 10 + consistent
        logger.debug("Candidate %r: %d fields, %d consistent, score %d", candidate, field_count, consistent, score)
        if score > best_score:
            best, best_score = candidate, score
    return best
