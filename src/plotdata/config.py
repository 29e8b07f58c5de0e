"""Environment-driven parse defaults.

Reads ``.env`` from the project root (or an explicit file) with python-dotenv:
  PLOTDATA_COMMENT_MARKERS -- whitespace-separated markers; empty disables filtering
  PLOTDATA_DELIMITER       -- a single character, or 'tab', '\\t', 'space', 'auto'

The parsing engine never reads the environment itself; hosts build a
ParseOptions here and pass it in.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from plotdata.parsing.schema import ParseOptions

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()

COMMENT_MARKERS_ENV = "PLOTDATA_COMMENT_MARKERS"
DELIMITER_ENV = "PLOTDATA_DELIMITER"

# Spelled-out delimiters accepted on the command line and in the environment
DELIMITER_ALIASES = {
    "tab": "\t",
    "\\t": "\t",
    "space": " ",
    "comma": ",",
    "pipe": "|",
    "semicolon": ";",
    "colon": ":",
}


def parse_delimiter_arg(value: str | None) -> str | None:
    """Translate a user-facing delimiter spelling; 'auto' or empty means detect."""
    if value is None or value == "" or value.lower() == "auto":
        return None
    return DELIMITER_ALIASES.get(value.lower(), value)


def options_from_env(env_file: Path | None = None) -> ParseOptions:
    """Build ParseOptions from the environment after loading *env_file* (default ROOT/.env)."""
    load_dotenv(env_file or ROOT / ".env")

    settings: dict = {}
    markers = os.getenv(COMMENT_MARKERS_ENV)
    if markers is not None:
        settings["comment_markers"] = tuple(markers.split())
    delimiter = parse_delimiter_arg(os.getenv(DELIMITER_ENV))
    if delimiter is not None:
        settings["delimiter"] = delimiter

    logger.debug("Parse options from environment: %s", settings)
    return ParseOptions(**settings)
