from dataclasses import replace
from datetime import date
from decimal import Decimal

from suprimentos.application.services.relatorio_service import RelatorioService
from suprimentos.domain.pedido.entities import Pedido
from suprimentos.domain.pedido.value_objects import Prioridade, StatusPedido

_BASE = Pedido(
    id="1",
    solicitacao_no="SC-1",
    fornecedor="ALFA",
    valor=Decimal("100.00"),
    data_solicitacao=date(2026, 1, 1),
    vencimento_nf=date(2026, 1, 1),
)


def _carteira() -> list[Pedido]:
    return [
        replace(_BASE, id="1", fornecedor="ALFA", valor=Decimal("100.10"), prioridade=Prioridade.URGENTE),
        replace(_BASE, id="2", fornecedor="BETA", valor=Decimal("50.00"), pedido_no="PD-9",
                status=StatusPedido.NF_RECEBIDA),
        replace(_BASE, id="3", fornecedor="ALFA", valor=Decimal("0.20"), solicitacao_no="---",
                status=StatusPedido.CANCELADO),
        replace(_BASE, id="4", fornecedor="GAMA", valor=Decimal("999.99"), arquivado=True),
    ]


def test_painel_ignora_arquivados():
    painel = RelatorioService().painel(_carteira())

    assert painel.total_pedidos == 3
    assert Decimal(painel.total_provisionado) == Decimal("150.30")
    assert painel.urgentes == 1
    assert painel.pendentes_nf == 2
    assert [(f.fornecedor, Decimal(f.valor)) for f in painel.principais_fornecedores] == [
        ("ALFA", Decimal("100.30")),
        ("BETA", Decimal("50.00")),
    ]


def test_painel_limita_cinco_fornecedores():
    pedidos = [replace(_BASE, id=str(i), fornecedor=f"F{i}") for i in range(8)]
    painel = RelatorioService().painel(pedidos)
    assert [f.fornecedor for f in painel.principais_fornecedores] == ["F0", "F1", "F2", "F3", "F4"]


def test_relatorio_contagens():
    rel = RelatorioService().relatorio(_carteira())

    assert rel.solicitacoes == 2  # "---" nao conta
    assert rel.pedidos_emitidos == 1
    assert rel.notas_recebidas == 1
    assert rel.pendentes == 2
    assert rel.cancelados == 1
    assert Decimal(rel.valor_total) == Decimal("150.30")
    assert Decimal(rel.media_por_pedido) == Decimal("50.10")
    assert [(f.nome, f.quantidade) for f in rel.distribuicao_status] == [
        ("NF Recebida", 1),
        ("Pendente", 2),
        ("Cancelado", 1),
    ]


def test_carteira_vazia():
    painel = RelatorioService().painel([])
    assert painel.total_pedidos == 0
    assert Decimal(painel.total_provisionado) == Decimal("0")
    assert painel.principais_fornecedores == []


def test_media_por_pedido_sem_pedidos_e_zero():
    rel = RelatorioService().relatorio([])
    assert Decimal(rel.media_por_pedido) == Decimal("0")
    assert Decimal(rel.valor_total) == Decimal("0")


def test_media_por_pedido_arredonda_centavos():
    pedidos = [
        replace(_BASE, id="1", valor=Decimal("10.00")),
        replace(_BASE, id="2", valor=Decimal("10.00")),
        replace(_BASE, id="3", valor=Decimal("0.01")),
    ]
    assert RelatorioService().relatorio(pedidos).media_por_pedido == "6.67"
