import csv
import io
import json
from datetime import date, datetime
from decimal import Decimal

from suprimentos.application.services.export_service import ExportService
from suprimentos.domain.cotacao.entities import CotacaoFornecedor, ItemCotacao, MapaCotacao
from suprimentos.domain.cotacao.recalculo import recalcular_item
from suprimentos.domain.pedido.entities import Pedido
from suprimentos.domain.pedido.parcelamento import gerar_parcelas
from suprimentos.infrastructure.pdf_generator import build_html_fluxo, build_html_mapa, build_html_pedido

PEDIDO = Pedido(
    id="abc",
    solicitacao_no="SC-77",
    fornecedor="RODOBENS <LTDA>",
    valor=Decimal("1234.56"),
    data_solicitacao=date(2026, 1, 10),
    vencimento_nf=date(2026, 1, 31),
    quantidade_parcelas=2,
    parcelas=gerar_parcelas(Decimal("1234.56"), 2, date(2026, 1, 31)),
)

MAPA = MapaCotacao(
    id="MAP-654321",
    titulo="FILTROS",
    data=date(2026, 5, 2),
    itens=(
        recalcular_item(
            ItemCotacao(
                id="i1",
                codigo="001",
                descricao="FILTRO DE OLEO",
                quantidade=10,
                fornecedores=(
                    CotacaoFornecedor(id="a", nome="ALFA", valor_unit=Decimal("5.00"), difal=Decimal("10")),
                    CotacaoFornecedor(id="b", nome="BETA", valor_unit=Decimal("6.00")),
                ),
            )
        ),
    ),
)


def test_pedidos_json():
    dados = json.loads(ExportService().exportar_pedidos_json([PEDIDO]))
    assert dados[0]["solicitacao_no"] == "SC-77"
    assert dados[0]["valor"] == "1234.56"
    assert [p["vencimento"] for p in dados[0]["parcelas"]] == ["2026-01-31", "2026-02-28"]


def test_pedidos_csv():
    linhas = list(csv.reader(io.StringIO(ExportService().exportar_pedidos_csv([PEDIDO]))))
    assert linhas[0][0] == "SC"
    assert linhas[1][0] == "SC-77"
    assert linhas[1][5] == "1234.56"
    assert linhas[1][8] == "2"


def test_mapa_csv_tem_colunas_por_fornecedor():
    texto = ExportService().exportar_mapa_csv(MAPA)
    assert texto.startswith("# MAPA MAP-654321")
    assert "ALFA Unit,ALFA DIFAL,ALFA Total,BETA Unit" in texto
    assert "55.00,ALFA" in texto
    assert "Total Melhores Precos,55.00" in texto


def test_mapa_json():
    dados = json.loads(ExportService().exportar_mapa_json(MAPA))
    assert dados["total_melhores_precos"] == "55.00"
    assert dados["itens"][0]["vencedor"] == "ALFA"


def test_html_pedido():
    html = build_html_pedido(PEDIDO)
    assert "PEDIDO DE COMPRA" in html
    assert "RODOBENS &lt;LTDA&gt;" in html
    assert "R$ 1.234,56" in html
    assert "28/02/2026" in html
    assert "EM ABERTO" in html


def test_html_fluxo():
    html = build_html_fluxo([PEDIDO], datetime(2026, 3, 1, 8, 30, 0))
    assert "Relatório de Fluxo - Gerado em: 01/03/2026 08:30:00" in html
    assert "SC-77" in html


def test_html_mapa():
    html = build_html_mapa(MAPA)
    assert "PRAZO ENTREGA: A COMBINAR" in html
    assert 'class="winner"' in html
    assert "VALOR TOTAL (MELHORES PREÇOS): R$ 55,00" in html
