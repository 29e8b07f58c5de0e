"""Failure taxonomy for table parsing.

Every failure is terminal: the engine returns a complete ParsedTable or
raises exactly one of these.  Malformed rows are never errors.
"""


class TableParseError(ValueError):
    """Base class for all parse failures, carrying a human-readable reason."""

    reason = "Could not parse table"

    def __init__(self, message: str | None = None, *, source_name: str | None = None):
        self.source_name = source_name
        text = message or self.reason
        if source_name:
            text = f"{source_name}: {text}"
        super().__init__(text)


class EmptyInputError(TableParseError):
    reason = "File is empty"


class NoDataAfterFilteringError(TableParseError):
    reason = "No data lines remain after removing blank and comment lines"


class UnsupportedFormatError(TableParseError):
    reason = "Unsupported file type"

    def __init__(self, tag: object = None, *, source_name: str | None = None):
        self.tag = tag
        message = f"Unsupported file type: {tag}" if tag is not None else None
        super().__init__(message, source_name=source_name)


class InvalidJsonError(TableParseError):
    reason = "Invalid JSON"


class UnsupportedJsonShapeError(TableParseError):
    reason = "JSON format not supported for tabular display"


class InvalidEncodingError(TableParseError):
    reason = "Input is not valid UTF-8 text"
