import logging
from collections.abc import Iterator

import duckdb
import pytest

# Inputs shared by escaping and round-trip tests. None of them contain NUL.
TRICKY_STRINGS = [
    "foo",
    "foo bar",
    'a"b',
    '""',
    '"',
    "'",
    "''",
    "it's",
    "hello 'world' foo",
    "x'; DROP TABLE t; --",
    'x"; DROP TABLE t; --',
    "back\\slash\\",
    "tab\tnew\nline\r",
    "\x01\x1f\x7f",
    "ünïcödé 年金计划号",
    "emoji 🦆",
    "/* comment */ --",
    "$$dollar$$",
]


@pytest.fixture
def con() -> Iterator[duckdb.DuckDBPyConnection]:
    con = duckdb.connect()
    yield con
    con.close()


class _RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


@pytest.fixture
def log_messages(monkeypatch: pytest.MonkeyPatch) -> Iterator[list[str]]:
    """Messages logged to the `sqlquote` logger at DEBUG level."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    handler = _RecordingHandler()
    logger = logging.getLogger("sqlquote")
    logger.addHandler(handler)
    yield handler.messages
    logger.removeHandler(handler)
