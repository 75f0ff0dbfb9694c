"""DuckDB IO helpers for schema and table operations."""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import duckdb
import polars as pl

from .data_type import ColumnSchema, DuckDbDialect
from .logger import log_debug, log_info
from .objects import Column, QuotedData, Schema, SchemaTable, Table
from .predicates import Predicates


def _execute(con: duckdb.DuckDBPyConnection, sql: str) -> duckdb.DuckDBPyConnection:
    log_debug(sql, stacklevel=2)
    return con.execute(sql)


def connect_db(path: Path) -> duckdb.DuckDBPyConnection:
    """Connect to DuckDB database file."""
    return duckdb.connect(str(path))


def ensure_schema(con: duckdb.DuckDBPyConnection, schema: str | Schema) -> None:
    """Ensure schema exists."""
    _execute(con, f"CREATE SCHEMA IF NOT EXISTS {Schema(schema)}")


def columns_from_polars_schema(schema: Mapping[str, Any]) -> list[ColumnSchema]:
    """DuckDB column definitions for a Polars schema (or any name -> dtype mapping)."""
    return [DuckDbDialect.column(name, dtype) for name, dtype in schema.items()]


def create_table(
    con: duckdb.DuckDBPyConnection,
    table: SchemaTable,
    columns: Iterable[ColumnSchema],
    replace: bool = False,
) -> None:
    """Create table with given column definitions."""
    columns = list(columns)
    if not columns:
        raise ValueError(f"No columns given for table {table}")
    create = "CREATE OR REPLACE TABLE" if replace else "CREATE TABLE"
    _execute(con, f"{create} {table} ({', '.join(str(c) for c in columns)})")


def write_lazyframe(
    con: duckdb.DuckDBPyConnection,
    table: SchemaTable,
    lf: pl.LazyFrame,
) -> None:
    """Write LazyFrame to DuckDB table."""
    write_dataframe(con, table, lf.collect())


def write_dataframe(
    con: duckdb.DuckDBPyConnection,
    table: SchemaTable,
    df: pl.DataFrame,
) -> None:
    """Write DataFrame to DuckDB table, replacing any existing one."""
    ensure_schema(con, table.schema)
    temp = Table(f"{table.schema.as_str()}_{table.table.as_str()}_temp")
    con.register(temp.as_str(), df.to_arrow())
    try:
        _execute(con, f"CREATE OR REPLACE TABLE {table} AS SELECT * FROM {temp}")
    finally:
        con.unregister(temp.as_str())
    log_info(f"Wrote {df.height} rows to {table}")


def write_dataframes(
    con: duckdb.DuckDBPyConnection,
    schema: str | Schema,
    frames: dict[str, pl.DataFrame],
) -> None:
    """Write multiple DataFrames to DuckDB tables in given schema."""
    for table, df in frames.items():
        write_dataframe(con, SchemaTable(schema, table), df)


def drop_table_if_exists(con: duckdb.DuckDBPyConnection, table: SchemaTable) -> None:
    """Drop a table if it exists."""
    _execute(con, f"DROP TABLE IF EXISTS {table}")


def table_exists(con: duckdb.DuckDBPyConnection, table: SchemaTable) -> bool:
    """Check the catalog for a base table or view."""
    where = Predicates.from_all(
        [
            f"{Column('table_schema')} = {table.schema.as_quoted_data()}",
            f"{Column('table_name')} = {table.table.as_quoted_data()}",
        ]
    ).as_where()
    return _execute(con, f"SELECT COUNT(*) FROM information_schema.tables {where}").fetchone()[0] > 0


def get_table_summary(con: duckdb.DuckDBPyConnection, schema: str | Schema) -> dict[str, int]:
    """Get row counts for all tables in a schema."""
    schema = Schema(schema)
    where = Predicates.from_all(
        [
            f"{Column('table_schema')} = {schema.as_quoted_data()}",
            f"{Column('table_type')} = {QuotedData('BASE TABLE')}",
        ]
    ).as_where()
    table_names = _execute(
        con,
        f"SELECT {Column('table_name')} FROM information_schema.tables {where} ORDER BY 1",
    ).fetchall()
    summary: dict[str, int] = {}
    for (table_name,) in table_names:
        count = _execute(con, f"SELECT COUNT(*) FROM {SchemaTable(schema, table_name)}").fetchone()[0]
        summary[f"{schema.as_str()}.{table_name}"] = count
    log_info(f"{len(summary)} tables in schema {schema}")
    return summary
