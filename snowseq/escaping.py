"""String literal escaping for generated SQL."""


def escape_string(value: str) -> str:
    """Escape text for embedding inside a single-quoted SQL string literal.

    Backslashes are escaped first so the backslash added in front of each
    quote is not doubled.
    """
    return value.replace("\\", "\\\\").replace("'", "\\'")
