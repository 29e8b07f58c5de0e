"""Host-side helpers: map a file path to a declared format and parse it from disk.

The parsing engine itself never touches the filesystem; these helpers read
the bytes and hand them to parse_table.
"""

import logging
from pathlib import Path

from plotdata.parsing.errors import UnsupportedFormatError
from plotdata.parsing.pipeline import parse_table
from plotdata.parsing.schema import DeclaredFormat, ParsedTable, ParseOptions

logger = logging.getLogger(__name__)


def format_for_path(path: str | Path) -> DeclaredFormat:
    """Return the declared format implied by the file extension."""
    suffix = Path(path).suffix
    if not suffix:
        raise UnsupportedFormatError("(no extension)", source_name=Path(path).name)
    return DeclaredFormat.from_tag(suffix)


def parse_file(
    path: str | Path,
    options: ParseOptions | None = None,
    declared_format: DeclaredFormat | str | None = None,
) -> ParsedTable:
    """Read *path* and parse it, inferring the format from the extension unless given."""
    path = Path(path)
    declared = DeclaredFormat.from_tag(declared_format) if declared_format is not None else format_for_path(path)
    logger.info("Loading %s as %s", path, declared.value)
    with open(path, "rb") as fopen:
        raw = fopen.read()
    return parse_table(path.name, raw, declared, options)
