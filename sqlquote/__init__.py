"""Typed wrappers for building correctly quoted and escaped SQL text."""

from .data_type import (
    ColumnSchema,
    ColumnType,
    Dialect,
    DuckDbDialect,
    MonetDbDialect,
    SqlServerDialect,
    UnsupportedDataTypeError,
)
from .escaping import quote_ident, quote_ident_parts, quote_literal, quote_literal_parts
from .objects import (
    Column,
    IdentifierConcat,
    MapQuotedData,
    Object,
    QuotedData,
    QuotedDataConcat,
    Schema,
    SchemaTable,
    Table,
)
from .predicates import PredicateStatement, Predicates

__all__ = [
    "Column",
    "ColumnSchema",
    "ColumnType",
    "Dialect",
    "DuckDbDialect",
    "IdentifierConcat",
    "MapQuotedData",
    "MonetDbDialect",
    "Object",
    "PredicateStatement",
    "Predicates",
    "QuotedData",
    "QuotedDataConcat",
    "Schema",
    "SchemaTable",
    "SqlServerDialect",
    "Table",
    "UnsupportedDataTypeError",
    "quote_ident",
    "quote_ident_parts",
    "quote_literal",
    "quote_literal_parts",
]
