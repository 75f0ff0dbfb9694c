"""SQL column type names per database dialect.

Data types are given as Polars data types (classes or instances, e.g. `pl.Int32`
or `pl.Datetime("us")`). The Python builtins `bool`, `int`, `float` and `str` are
accepted as shorthands for `pl.Boolean`, `pl.Int64`, `pl.Float64` and `pl.String`.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

import polars as pl

from .objects import Column

PYTHON_TYPES: dict[type, type[pl.DataType]] = {
    bool: pl.Boolean,
    int: pl.Int64,
    float: pl.Float64,
    str: pl.String,
}


class UnsupportedDataTypeError(ValueError):
    """Dialect has no SQL type for the given data type."""


def _base_type(dtype: Any) -> type[pl.DataType]:
    for python_type, polars_type in PYTHON_TYPES.items():
        if dtype is python_type:
            return polars_type
    if isinstance(dtype, pl.DataType) or (isinstance(dtype, type) and issubclass(dtype, pl.DataType)):
        return dtype.base_type()
    raise UnsupportedDataTypeError(f"Not a data type: {dtype!r}")


class Dialect:
    """Base class for dialects. Subclasses declare `name` and `types`."""

    name: ClassVar[str]
    types: ClassVar[dict[type[pl.DataType], str]]

    @classmethod
    def sql_type(cls, dtype: Any) -> str:
        """Get SQL type name of the given data type."""
        base = _base_type(dtype)
        for polars_type, sql_name in cls.types.items():
            if base is polars_type:
                return sql_name
        raise UnsupportedDataTypeError(f"{cls.name} has no SQL type for {base.__name__}")

    @classmethod
    def column(cls, name: str | Column, dtype: Any) -> "ColumnSchema":
        """Column definition with this dialect's type for `dtype`."""
        return ColumnSchema(Column(name), ColumnType(cls, dtype))


class SqlServerDialect(Dialect):
    name = "SQL Server"
    types = {
        pl.Boolean: "BIT",
        pl.Int8: "TINYINT",
        pl.Int16: "SMALLINT",
        pl.Int32: "INT",
        pl.Int64: "BIGINT",
        pl.Float32: "REAL",
        pl.Float64: "FLOAT",
        pl.String: "NVARCHAR",
    }


class MonetDbDialect(Dialect):
    name = "MonetDB"
    types = {
        pl.Boolean: "BOOLEAN",
        pl.Int8: "TINYINT",
        pl.Int16: "SMALLINT",
        pl.Int32: "INT",
        pl.Int64: "BIGINT",
        pl.Float64: "DOUBLE",
        pl.String: "STRING",
    }


class DuckDbDialect(Dialect):
    name = "DuckDB"
    types = {
        pl.Boolean: "BOOLEAN",
        pl.Int8: "TINYINT",
        pl.Int16: "SMALLINT",
        pl.Int32: "INTEGER",
        pl.Int64: "BIGINT",
        pl.Float32: "FLOAT",
        pl.Float64: "DOUBLE",
        pl.String: "VARCHAR",
        pl.Date: "DATE",
        pl.Datetime: "TIMESTAMP",
    }


@dataclass(frozen=True)
class ColumnType:
    """Data type rendered as the dialect's SQL type name."""

    dialect: type[Dialect]
    dtype: Any

    def __post_init__(self):
        # raises UnsupportedDataTypeError for unmapped types
        self.dialect.sql_type(self.dtype)

    def __str__(self) -> str:
        return self.dialect.sql_type(self.dtype)


@dataclass(frozen=True)
class ColumnSchema:
    """Column definition rendered as `"name" TYPE`."""

    column: Column
    column_type: ColumnType

    def __post_init__(self):
        if not isinstance(self.column, Column):
            object.__setattr__(self, "column", Column(self.column))

    def __str__(self) -> str:
        return f"{self.column} {self.column_type}"
