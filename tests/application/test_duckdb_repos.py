import json
from datetime import date
from decimal import Decimal

import duckdb

from suprimentos.domain.pedido.entities import Pedido
from suprimentos.infrastructure.repositories.documento_store import DuckDBDocumentoStore
from suprimentos.infrastructure.repositories.duckdb_cotacao_repo import CHAVE_COTACOES, DuckDBMapaCotacaoRepo
from suprimentos.infrastructure.repositories.duckdb_pedido_repo import CHAVE_PEDIDOS, DuckDBPedidoRepo


def test_sem_documento_retorna_lista_vazia(pedido_repo: DuckDBPedidoRepo, mapa_repo: DuckDBMapaCotacaoRepo):
    assert pedido_repo.listar() == []
    assert mapa_repo.listar() == []


def test_documento_corrompido_retorna_lista_vazia(conn: duckdb.DuckDBPyConnection):
    store = DuckDBDocumentoStore(conn)
    store.gravar(CHAVE_PEDIDOS, "{nao e json")
    store.gravar(CHAVE_COTACOES, "[1, 2")
    assert DuckDBPedidoRepo(conn).listar() == []
    assert DuckDBMapaCotacaoRepo(conn).listar() == []


def test_gravar_substitui_documento(conn: duckdb.DuckDBPyConnection):
    store = DuckDBDocumentoStore(conn)
    store.gravar("k", "1")
    store.gravar("k", "2")
    assert store.ler("k") == "2"


def test_le_formato_do_navegador(conn: duckdb.DuckDBPyConnection):
    """Numeros em float e campos camelCase, como o localStorage gravava."""
    doc = [
        {
            "id": "1718000000000",
            "solicitacaoNo": "123",
            "pedidoNo": "",
            "fornecedor": "RODOBENS",
            "valor": 1500.5,
            "dataSolicitacao": "2026-01-10",
            "vencimentoNF": "2026-02-10",
            "previsaoEntrega": "",
            "parcelas": 2,
            "prioridade": "URGENTE",
            "status": "EM COTAÇÃO",
            "isArchived": False,
            "listaParcelas": [
                {"numero": 1, "vencimento": "2026-02-10", "valor": 750.25, "paga": True},
                {"numero": 2, "vencimento": "2026-03-10", "valor": 750.25, "paga": False},
            ],
        },
        {"id": "2", "solicitacaoNo": ""},  # invalido: ignorado
    ]
    DuckDBDocumentoStore(conn).gravar(CHAVE_PEDIDOS, json.dumps(doc))

    pedidos = DuckDBPedidoRepo(conn).listar()
    assert len(pedidos) == 1
    p = pedidos[0]
    assert p.valor == Decimal("1500.50")
    assert p.previsao_entrega is None
    assert p.status.value == "EM COTAÇÃO"
    assert p.parcelas[0].paga is True
    assert p.parcelas[1].vencimento == date(2026, 3, 10)


def test_mapa_unico_e_embrulhado_em_lista(conn: duckdb.DuckDBPyConnection):
    doc = {
        "id": "MAP-100200",
        "titulo": "ANTIGO",
        "data": "2025-12-01",
        "status": "PENDENTE",
        "prazoEntrega": "A COMBINAR",
        "itens": [
            {
                "id": "a",
                "codigo": "001",
                "quantidade": 10,
                "vencedor": "ERRADO",
                "menorValor": 1,
                "fornecedores": [
                    {"id": "x", "nome": "X", "valorUnit": 5, "difal": 10, "total": 999},
                ],
            }
        ],
    }
    DuckDBDocumentoStore(conn).gravar(CHAVE_COTACOES, json.dumps(doc))

    mapas = DuckDBMapaCotacaoRepo(conn).listar()
    assert len(mapas) == 1
    item = mapas[0].itens[0]
    assert mapas[0].prazo_entrega is None
    # derivados sao recalculados na leitura
    assert item.fornecedores[0].total == Decimal("55.00")
    assert item.vencedor == "X"


def test_registro_ilegivel_sobrevive_a_gravacao(conn: duckdb.DuckDBPyConnection):
    legado = {"id": "1", "solicitacaoNo": "SC-9", "fornecedor": "ALFA", "valor": 10, "prioridade": "BAIXA"}
    DuckDBDocumentoStore(conn).gravar(CHAVE_PEDIDOS, json.dumps([legado]))
    repo = DuckDBPedidoRepo(conn)
    assert repo.listar() == []

    novo = Pedido(
        id="2",
        solicitacao_no="SC-10",
        fornecedor="BETA",
        valor=Decimal("5.00"),
        data_solicitacao=date(2026, 1, 1),
        vencimento_nf=date(2026, 1, 1),
    )
    repo.salvar_todos([novo])

    gravados = json.loads(DuckDBDocumentoStore(conn).ler(CHAVE_PEDIDOS) or "[]")
    assert [d["id"] for d in gravados] == ["2", "1"]
    assert gravados[1] == legado
    assert [p.id for p in repo.listar()] == ["2"]


def test_mapa_ilegivel_sobrevive_a_gravacao(conn: duckdb.DuckDBPyConnection):
    legado = {"id": "MAP-1", "titulo": "X", "status": "EM ANALISE", "itens": []}
    DuckDBDocumentoStore(conn).gravar(CHAVE_COTACOES, json.dumps(legado))
    repo = DuckDBMapaCotacaoRepo(conn)
    assert repo.listar() == []

    repo.salvar_todos([])

    gravados = json.loads(DuckDBDocumentoStore(conn).ler(CHAVE_COTACOES) or "[]")
    assert gravados == [legado]
