# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import duckdb
import pytest
from fastapi.testclient import TestClient

# Sem chave: resumos caem no texto padrao sem chamar a rede
os.environ["GEMINI_API_KEY"] = ""


@pytest.fixture
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory novo a cada teste: as colecoes comecam vazias."""
    conn = duckdb.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    from suprimentos.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    from suprimentos.infrastructure.config import get_settings
    get_settings.cache_clear()

    from suprimentos.interfaces.api.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture
def pedido_criado(client: TestClient) -> dict[str, object]:
    response = client.post(
        "/api/pedidos",
        json={
            "solicitacao_no": "SC-500",
            "fornecedor": "rodobens",
            "valor": "100",
            "parcelas": 3,
            "vencimento_nf": "2026-01-31",
            "prioridade": "URGENTE",
        },
    )
    assert response.status_code == 201
    return response.json()
