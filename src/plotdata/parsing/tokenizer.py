"""Quote-aware splitting of one line into trimmed fields.

A double quote toggles the "inside quotes" state and is dropped from the
output.  There is no escaped-quote form (``""`` is two toggles, not a literal
quote) and a quoted field never continues onto the next line.  The last
buffer is always emitted, so a trailing delimiter yields a trailing empty
field.
"""


def tokenize_line(line: str, delimiter: str) -> tuple[str, ...]:
    """Split *line* on *delimiter* outside double quotes, trimming every field."""
    fields: list[str] = []
    buffer: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(buffer).strip())
            buffer = []
        else:
            buffer.append(char)
    fields.append("".join(buffer).strip())
    return tuple(fields)
