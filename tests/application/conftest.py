# tests/application/conftest.py
from __future__ import annotations

from collections.abc import Generator

import duckdb
import pytest

from suprimentos.infrastructure.duckdb_connection import SCHEMA
from suprimentos.infrastructure.repositories.duckdb_cotacao_repo import DuckDBMapaCotacaoRepo
from suprimentos.infrastructure.repositories.duckdb_pedido_repo import DuckDBPedidoRepo


@pytest.fixture
def conn() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com a tabela de documentos vazia."""
    c = duckdb.connect(":memory:")
    c.execute(SCHEMA)
    yield c
    c.close()


@pytest.fixture
def pedido_repo(conn: duckdb.DuckDBPyConnection) -> DuckDBPedidoRepo:
    return DuckDBPedidoRepo(conn)


@pytest.fixture
def mapa_repo(conn: duckdb.DuckDBPyConnection) -> DuckDBMapaCotacaoRepo:
    return DuckDBMapaCotacaoRepo(conn)
