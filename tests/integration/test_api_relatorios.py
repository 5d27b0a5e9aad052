# tests/integration/test_api_relatorios.py
from decimal import Decimal

from fastapi.testclient import TestClient

from suprimentos.infrastructure.gemini_resumidor import FALLBACK_ANALISE, FALLBACK_RESUMO


def test_painel(client: TestClient, pedido_criado: dict) -> None:
    response = client.get("/api/painel")
    assert response.status_code == 200
    data = response.json()
    assert data["total_pedidos"] == 1
    assert data["urgentes"] == 1
    assert data["pendentes_nf"] == 1
    assert Decimal(data["total_provisionado"]) == Decimal("100")
    assert data["principais_fornecedores"][0]["fornecedor"] == "RODOBENS"


def test_relatorios(client: TestClient, pedido_criado: dict) -> None:
    data = client.get("/api/relatorios").json()
    assert data["solicitacoes"] == 1
    assert data["pedidos_emitidos"] == 0
    assert data["pendentes"] == 1
    assert Decimal(data["media_por_pedido"]) == Decimal("100")
    assert {f["nome"] for f in data["distribuicao_status"]} == {"NF Recebida", "Pendente", "Cancelado"}


def test_resumo_sem_chave_devolve_fallback(client: TestClient) -> None:
    response = client.post("/api/resumos/pedidos")
    assert response.status_code == 200
    assert response.json()["texto"] == FALLBACK_RESUMO


def test_analise_de_mapa(client: TestClient) -> None:
    mapa = client.post("/api/cotacoes").json()
    response = client.post(f"/api/cotacoes/{mapa['id']}/analise")
    assert response.status_code == 200
    assert response.json()["texto"] == FALLBACK_ANALISE

    assert client.post("/api/cotacoes/MAP-000000/analise").status_code == 404


def test_security_headers(client: TestClient) -> None:
    response = client.get("/api/pedidos")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
