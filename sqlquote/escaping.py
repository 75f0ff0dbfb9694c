"""Quote-doubling escape rules for SQL identifiers and string literals.

Identifiers are wrapped in double quotes, literals in single quotes. An embedded
quote character is written twice. No other character is touched: backslashes,
control characters and NUL pass through as-is.
"""

from collections.abc import Iterable


def quote_ident(name: str) -> str:
    """Quote a SQL identifier (schema, table or column name).

    Examples:
        >>> quote_ident("foo bar")
        '"foo bar"'
        >>> quote_ident('a"b')
        '"a""b"'
        >>> quote_ident("")
        '""'
    """
    return f'"{name.replace('"', '""')}"'


def quote_literal(value: str) -> str:
    """Quote a SQL string literal.

    Examples:
        >>> quote_literal("hello 'world' foo")
        "'hello ''world'' foo'"
        >>> quote_literal("")
        "''"
    """
    return f"'{value.replace("'", "''")}'"


def quote_ident_parts(parts: Iterable[str]) -> str:
    """Concatenate parts and quote the result as a single identifier."""
    return quote_ident("".join(parts))


def quote_literal_parts(parts: Iterable[str]) -> str:
    """Concatenate parts and quote the result as a single string literal."""
    return quote_literal("".join(parts))
