"""Per-cell numeric coercion."""

from collections.abc import Sequence

from plotdata.parsing.classifiers import is_numeric
from plotdata.parsing.schema import NumberCell, TextCell


def coerce_value(text: str) -> TextCell | NumberCell:
    """Return a NumberCell when *text* parses fully as a number, else the text unchanged."""
    if is_numeric(text):
        return NumberCell(value=float(text))
    return TextCell(value=text)


def coerce_row(fields: Sequence[str]) -> tuple[TextCell | NumberCell, ...]:
    """Coerce every field of one row independently."""
    return tuple(coerce_value(field) for field in fields)
