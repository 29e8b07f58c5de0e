"""Compiled regex patterns and constant tuples for tabular text parsing.

These constants drive comment filtering, delimiter scoring, header detection
and numeric coercion.  Used by classifiers.py, delimiters.py and headers.py.
"""

import re

# ─── Cell Patterns ────────────────────────────────────────────────────────────

# Strict decimal number: optional sign, digits with optional fraction (or a
# bare fraction like ".5"), optional exponent.  No hex, no "inf"/"nan", no
# digit-group underscores.
NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


# ─── Comment Markers ──────────────────────────────────────────────────────────

DEFAULT_COMMENT_MARKERS = ("#", "%", "//")


# ─── Delimiter Candidates ─────────────────────────────────────────────────────

# Order matters: earlier candidates win score ties
CSV_CANDIDATES = (",", ";")
GENERAL_CANDIDATES = (",", "|", ";", ":", "\t", " ")

# Used when no candidate qualifies
FALLBACK_DELIMITER = ","

# Lines examined after the first line when scoring consistency
SAMPLE_LINE_COUNT = 5


# ─── Header Detection ─────────────────────────────────────────────────────────

# Single-column inputs only consume their first line as a header when it is one of these
HEADER_WORDS = ("value", "values", "name", "id", "item", "label", "key")

SYNTHETIC_HEADER_PREFIX = "Column"

# Header for a JSON array of primitives
JSON_VALUE_HEADER = "Value"

# Placeholder for a key absent from a later JSON record
JSON_MISSING_PLACEHOLDER = "undefined"
