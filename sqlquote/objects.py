"""Typed wrappers that render as escaped SQL fragments.

Each wrapper holds the raw, unescaped value and renders itself through one of the
two escape rules in `sqlquote.escaping` when converted to text, so it can be
interpolated directly into a query:

    >>> f"SELECT {Column('foo bar')} FROM {SchemaTable('foo', 'baz')} WHERE {Column('blah')} = {QuotedData('x')}"
    'SELECT "foo bar" FROM "foo"."baz" WHERE "blah" = \\'x\\''

Wrappers compare, hash and sort by their raw value. A `Column` never equals a
`Table` with the same name.
"""

from collections.abc import Callable
from dataclasses import dataclass

from .escaping import quote_ident, quote_ident_parts, quote_literal, quote_literal_parts


@dataclass(frozen=True, order=True)
class QuotedDataConcat:
    """Parts concatenated and rendered as one string literal."""

    parts: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "parts", tuple(self.parts))

    def __str__(self) -> str:
        return quote_literal_parts(self.parts)


@dataclass(frozen=True, order=True)
class IdentifierConcat:
    """Parts concatenated and rendered as one identifier."""

    parts: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "parts", tuple(self.parts))

    def as_quoted_data(self) -> QuotedDataConcat:
        return QuotedDataConcat(self.parts)

    def __str__(self) -> str:
        return quote_ident_parts(self.parts)


@dataclass(frozen=True, order=True)
class Object:
    """
    Generic SQL object name (table, schema, column etc.).

    Accepts a plain string or another identifier wrapper; in the latter case
    the wrapped raw name is reused.
    """

    name: str

    def __post_init__(self):
        if isinstance(self.name, Object):
            object.__setattr__(self, "name", self.name.name)

    def as_str(self) -> str:
        """Get the original, unescaped name."""
        return self.name

    def as_quoted_data(self) -> "QuotedData":
        """Get the name rendered as a string literal instead of an identifier."""
        return QuotedData(self.name)

    def __str__(self) -> str:
        return quote_ident(self.name)


class Schema(Object):
    """Database schema name."""


class Column(Object):
    """Table column name."""


class Table(Object):
    """Database table name."""

    def with_schema(self, schema: "str | Object") -> "SchemaTable":
        return SchemaTable(schema, self)

    def with_postfix(self, postfix: str) -> IdentifierConcat:
        """Table name with `postfix` appended, rendered as one identifier."""
        return IdentifierConcat((self.name, postfix))

    def with_postfix_sep(self, postfix: str, separator: str) -> IdentifierConcat:
        """Table name with `separator` and `postfix` appended, rendered as one identifier."""
        return IdentifierConcat((self.name, separator, postfix))


@dataclass(frozen=True, order=True)
class SchemaTable:
    """
    Table name qualified by its schema.

    Schema and table are escaped independently and joined with a dot:

        >>> str(SchemaTable("foo", 'b"az'))
        '"foo"."b""az"'
    """

    schema: Schema
    table: Table

    def __post_init__(self):
        if not isinstance(self.schema, Schema):
            object.__setattr__(self, "schema", Schema(self.schema))
        if not isinstance(self.table, Table):
            object.__setattr__(self, "table", Table(self.table))

    def with_postfix(self, postfix: str) -> "SchemaTable":
        """Same schema, table name with `postfix` appended."""
        return SchemaTable(self.schema, Table(self.table.name + postfix))

    def with_postfix_sep(self, postfix: str, separator: str) -> "SchemaTable":
        """Same schema, table name with `separator` and `postfix` appended."""
        return SchemaTable(self.schema, Table(self.table.name + separator + postfix))

    def as_quoted_data(self) -> QuotedDataConcat:
        """Get `schema.table` as a single string literal, e.g. for catalog lookups."""
        return QuotedDataConcat((self.schema.name, ".", self.table.name))

    def __str__(self) -> str:
        return f"{self.schema}.{self.table}"


@dataclass(frozen=True, order=True)
class QuotedData:
    """String value rendered as a single-quoted SQL literal."""

    value: str

    def as_str(self) -> str:
        """Get the original, unescaped value."""
        return self.value

    def map(self, fn: Callable[[str], str]) -> "MapQuotedData":
        """Transform the value with `fn` at render time, then quote the result."""
        return MapQuotedData(self.value, fn)

    def __str__(self) -> str:
        return quote_literal(self.value)


@dataclass(frozen=True)
class MapQuotedData:
    """Literal whose value is produced by applying `fn` to the raw value."""

    value: str
    fn: Callable[[str], str]

    def __str__(self) -> str:
        return quote_literal(self.fn(self.value))
