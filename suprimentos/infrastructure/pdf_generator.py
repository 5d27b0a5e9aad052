from __future__ import annotations

from datetime import date, datetime
from html import escape

from suprimentos.domain.cotacao.entities import MapaCotacao
from suprimentos.domain.pedido.entities import Pedido
from suprimentos.domain.shared.value_objects import formatar_reais

from .config import get_settings


def _render_pdf(html: str) -> bytes:
    """Raises RuntimeError if weasyprint is not installed."""
    try:
        from weasyprint import HTML  # type: ignore[import-untyped,import-not-found]
    except ImportError as err:
        msg = "PDF export requires weasyprint. Install with: pip install gestao-suprimentos[pdf]"
        raise RuntimeError(msg) from err

    return HTML(string=html).write_pdf()  # type: ignore[no-any-return]


def gerar_pdf_pedido(pedido: Pedido) -> bytes:
    return _render_pdf(build_html_pedido(pedido))


def gerar_pdf_fluxo(pedidos: list[Pedido], gerado_em: datetime | None = None) -> bytes:
    return _render_pdf(build_html_fluxo(pedidos, gerado_em or datetime.now()))


def gerar_pdf_mapa(mapa: MapaCotacao) -> bytes:
    return _render_pdf(build_html_mapa(mapa))


def formatar_data(valor: date | None, vazio: str = "---") -> str:
    return valor.strftime("%d/%m/%Y") if valor else vazio


def build_html_pedido(pedido: Pedido) -> str:
    empresa = escape(get_settings().empresa_nome)
    sections: list[str] = []

    sections.append(f"""
    <div class="banner">
        <h1>PEDIDO DE COMPRA</h1>
        <p>{empresa}</p>
        <p>SC: {escape(pedido.solicitacao_no)} | PD: {escape(pedido.pedido_no or "---")}</p>
    </div>
    """)

    sections.append(f"""
    <h2>Informações do Fornecedor</h2>
    <table>
        <tr><td class="label">Fornecedor</td><td>{escape(pedido.fornecedor)}</td></tr>
        <tr><td class="label">Previsão de Entrega</td><td>{formatar_data(pedido.previsao_entrega, "NÃO INFORMADA")}</td></tr>
        <tr><td class="label">Valor Total</td><td>{formatar_reais(pedido.valor)}</td></tr>
        <tr><td class="label">Status Atual</td><td>{pedido.status.value}</td></tr>
        <tr><td class="label">Observações</td><td>{escape(pedido.observacoes or "Nenhuma")}</td></tr>
    </table>
    """)

    if pedido.parcelas:
        parcela_rows = "".join(
            f"<tr><td>{p.numero}a Parcela</td><td>{formatar_data(p.vencimento)}</td>"
            f"<td>{formatar_reais(p.valor)}</td><td>{'LIQUIDADA' if p.paga else 'EM ABERTO'}</td></tr>"
            for p in pedido.parcelas
        )
        sections.append(f"""
        <h2>Cronograma de Pagamento</h2>
        <table>
            <tr><th>Parcela</th><th>Vencimento</th><th>Valor</th><th>Situação</th></tr>
            {parcela_rows}
        </table>
        """)

    return _documento(f"Pedido - {escape(pedido.solicitacao_no)}", sections, paisagem=False)


def build_html_fluxo(pedidos: list[Pedido], gerado_em: datetime) -> str:
    empresa = escape(get_settings().empresa_nome)
    rows = "".join(
        f"<tr><td>{escape(p.solicitacao_no)}</td><td>{escape(p.pedido_no or '---')}</td>"
        f"<td>{escape(p.nf_no or 'PENDENTE')}</td><td>{escape(p.fornecedor)}</td>"
        f"<td>{formatar_data(p.previsao_entrega)}</td><td>{formatar_reais(p.valor)}</td>"
        f"<td>{p.status.value}</td></tr>"
        for p in pedidos
    )
    sections = [
        f"""
    <h1>{empresa}</h1>
    <p class="subtitle">Relatório de Fluxo - Gerado em: {gerado_em.strftime("%d/%m/%Y %H:%M:%S")}</p>
    <table>
        <tr><th>SC</th><th>PD</th><th>NF</th><th>Fornecedor</th><th>Prev. Entrega</th><th>Valor</th><th>Status</th></tr>
        {rows}
    </table>
    """
    ]
    return _documento("Relatório de Fluxo", sections, paisagem=True)


def build_html_mapa(mapa: MapaCotacao) -> str:
    empresa = escape(get_settings().empresa_nome)
    sections: list[str] = []

    sections.append(f"""
    <div class="banner">
        <h1>{empresa}</h1>
        <p>REFERÊNCIA: {escape(mapa.id)} | STATUS: {mapa.status.value}</p>
        <p>{escape(mapa.titulo)}</p>
        <p class="small">TAG: {escape(mapa.tag_equipamento or "---")} | DATA EMISSÃO: {formatar_data(mapa.data, "A COMBINAR")}
        | PRAZO ENTREGA: {formatar_data(mapa.prazo_entrega, "A COMBINAR")}</p>
    </div>
    """)

    fornecedor_heads = "".join(f"<th>{escape(f.nome)}</th><th>Total</th>" for f in mapa.fornecedores)
    item_rows: list[str] = []
    for idx, it in enumerate(mapa.itens, start=1):
        celulas = "".join(
            f"<td>Marca: {escape(f.marca or '---')}<br>Unit: {formatar_reais(f.valor_unit)}<br>DIFAL: {f.difal}%</td>"
            f"<td class=\"{'winner' if f.total > 0 and f.total == it.menor_valor else ''}\">"
            f"{formatar_reais(f.total) if f.valor_unit > 0 else '-'}</td>"
            for f in it.fornecedores
        )
        item_rows.append(
            f"<tr><td>{idx}</td><td>{escape(it.descricao)}<br>PN: {escape(it.part_number or '---')}</td>"
            f"<td>{it.quantidade}</td>{celulas}<td>{escape(it.vencedor or '---')}</td></tr>"
        )

    colunas = 4 + 2 * len(mapa.fornecedores)
    sections.append(f"""
    <table>
        <tr><th>#</th><th>Descrição / PN</th><th>Qtd</th>{fornecedor_heads}<th>Vencedor</th></tr>
        {"".join(item_rows)}
        <tr><td class="total" colspan="{colunas}">VALOR TOTAL (MELHORES PREÇOS): {formatar_reais(mapa.total_melhores_precos)}</td></tr>
    </table>
    """)

    return _documento(f"Mapa - {escape(mapa.id)}", sections, paisagem=True)


def _documento(titulo: str, sections: list[str], paisagem: bool) -> str:
    body = "\n".join(sections)
    orientacao = "landscape" if paisagem else "portrait"

    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<title>{titulo}</title>
<style>
    @page {{ size: A4 {orientacao}; margin: 10mm; }}
    body {{ font-family: Helvetica, Arial, sans-serif; font-size: 9px; color: #0f172a; }}
    h1 {{ font-size: 18px; margin: 0 0 6px 0; }}
    h2 {{ font-size: 12px; margin-top: 20px; text-transform: uppercase; }}
    .banner {{ background-color: #0f172a; color: #fff; padding: 12px 16px; }}
    .banner h1 {{ color: #facc15; }}
    .banner p {{ margin: 2px 0; }}
    .small {{ font-size: 8px; }}
    .subtitle {{ font-size: 11px; margin-bottom: 12px; }}
    table {{ width: 100%; border-collapse: collapse; margin-top: 8px; }}
    th, td {{ border: 1px solid #000; padding: 4px 6px; text-align: left; vertical-align: top; }}
    th {{ background-color: #0f172a; color: #fff; font-weight: bold; text-align: center; }}
    .label {{ font-weight: bold; width: 160px; background-color: #f9f9f9; }}
    .winner {{ background-color: #ecf5e8; font-weight: bold; }}
    .total {{ text-align: center; font-weight: bold; background-color: #f1f5f9; }}
</style>
</head>
<body>
{body}
</body>
</html>"""
