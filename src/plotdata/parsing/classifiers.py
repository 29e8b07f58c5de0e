"""Cell classification helpers.

Each function takes one trimmed field string and returns True/False.  Header
inference and value coercion share these so that a string is judged numeric
the same way everywhere.
"""

from plotdata.parsing.patterns import HEADER_WORDS, NUMBER_RE


def is_numeric(text: str) -> bool:
    """Return True if the whole non-empty string is a decimal number (sign, fraction, exponent allowed)."""
    return bool(text) and NUMBER_RE.fullmatch(text) is not None


def is_label(text: str) -> bool:
    """Return True for a non-empty, non-numeric field, the only evidence of a header row."""
    return bool(text) and not is_numeric(text)


def is_header_word(text: str) -> bool:
    """Return True if the field is one of the generic column names like 'value' or 'id'."""
    return text.strip().lower() in HEADER_WORDS
