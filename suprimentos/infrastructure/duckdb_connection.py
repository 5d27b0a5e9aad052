from __future__ import annotations

import duckdb

from .config import get_settings

_connection: duckdb.DuckDBPyConnection | None = None

SCHEMA = """
CREATE TABLE IF NOT EXISTS documento (
    chave VARCHAR PRIMARY KEY,
    valor VARCHAR NOT NULL,
    atualizado_em TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""


def get_connection() -> duckdb.DuckDBPyConnection:
    global _connection  # noqa: PLW0603
    if _connection is None:
        _connection = duckdb.connect(get_settings().duckdb_path)
        _connection.execute(SCHEMA)
    return _connection


def set_connection(conn: duckdb.DuckDBPyConnection) -> None:
    """Usado em testes para injetar DuckDB in-memory."""
    global _connection  # noqa: PLW0603
    conn.execute(SCHEMA)
    _connection = conn
