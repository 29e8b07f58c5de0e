"""Comment and blank line removal, applied before any structural analysis."""

from collections.abc import Sequence

from plotdata.parsing.patterns import DEFAULT_COMMENT_MARKERS


def split_lines(text: str) -> list[str]:
    """Split on newlines, dropping the carriage return of CRLF line endings."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def is_comment_line(line: str, comment_markers: Sequence[str]) -> bool:
    """Return True if the trimmed line starts with any of the comment markers."""
    if not comment_markers:
        return False
    return line.strip().startswith(tuple(comment_markers))


def filter_comment_lines(lines: Sequence[str], comment_markers: Sequence[str] = DEFAULT_COMMENT_MARKERS) -> list[str]:
    """Return the lines that are neither blank nor comments, in their original order.

    Lines are returned untrimmed; the tokenizer trims each field.
    """
    return [line for line in lines if line.strip() and not is_comment_line(line, comment_markers)]
