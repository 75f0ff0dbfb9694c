import polars as pl
import pytest

from sqlquote import (
    Column,
    ColumnSchema,
    ColumnType,
    DuckDbDialect,
    MonetDbDialect,
    SqlServerDialect,
    UnsupportedDataTypeError,
)


@pytest.mark.parametrize(
    "dtype, expected",
    [
        (pl.Boolean, "BIT"),
        (pl.Int8, "TINYINT"),
        (pl.Int16, "SMALLINT"),
        (pl.Int32, "INT"),
        (pl.Int64, "BIGINT"),
        (pl.Float32, "REAL"),
        (pl.Float64, "FLOAT"),
        (pl.String, "NVARCHAR"),
    ],
)
def test_sql_server_types(dtype, expected: str) -> None:
    assert SqlServerDialect.sql_type(dtype) == expected


@pytest.mark.parametrize(
    "dtype, expected",
    [
        (pl.Boolean, "BOOLEAN"),
        (pl.Int8, "TINYINT"),
        (pl.Int16, "SMALLINT"),
        (pl.Int32, "INT"),
        (pl.Int64, "BIGINT"),
        (pl.Float64, "DOUBLE"),
        (pl.String, "STRING"),
    ],
)
def test_monetdb_types(dtype, expected: str) -> None:
    assert MonetDbDialect.sql_type(dtype) == expected


def test_python_builtins_are_shorthands() -> None:
    assert SqlServerDialect.sql_type(bool) == "BIT"
    assert SqlServerDialect.sql_type(int) == "BIGINT"
    assert SqlServerDialect.sql_type(float) == "FLOAT"
    assert SqlServerDialect.sql_type(str) == "NVARCHAR"


def test_dtype_instances_and_parametrized_types() -> None:
    assert DuckDbDialect.sql_type(pl.Int32()) == "INTEGER"
    assert DuckDbDialect.sql_type(pl.Utf8) == "VARCHAR"
    assert DuckDbDialect.sql_type(pl.Datetime("us")) == "TIMESTAMP"
    assert DuckDbDialect.sql_type(pl.Date) == "DATE"


def test_unsupported_types() -> None:
    with pytest.raises(UnsupportedDataTypeError, match="MonetDB"):
        MonetDbDialect.sql_type(pl.Float32)
    with pytest.raises(UnsupportedDataTypeError):
        SqlServerDialect.sql_type(pl.Date)
    with pytest.raises(ValueError):
        SqlServerDialect.sql_type("INT")
    with pytest.raises(UnsupportedDataTypeError):
        ColumnType(MonetDbDialect, pl.Float32)


def test_column_schema() -> None:
    assert str(ColumnType(SqlServerDialect, pl.Int16)) == "SMALLINT"
    assert str(ColumnSchema(Column("foo bar"), ColumnType(MonetDbDialect, str))) == '"foo bar" STRING'
    assert str(SqlServerDialect.column('a"b', pl.Boolean)) == '"a""b" BIT'
    assert SqlServerDialect.column("x", int) == ColumnSchema("x", ColumnType(SqlServerDialect, int))
    assert SqlServerDialect.column(Column("x"), int).column == Column("x")
