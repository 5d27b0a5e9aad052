# suprimentos/application/services/relatorio_service.py
#
# Dashboard and report aggregations over the order list.
#
# Money is aggregated as integer cents (Int64) and converted back to Decimal
# at the end, so sums are exact regardless of the polars Decimal support of
# the installed version.
from __future__ import annotations

from decimal import Decimal

import polars as pl

from suprimentos.domain.pedido.entities import Pedido
from suprimentos.domain.pedido.value_objects import Prioridade, StatusPedido
from suprimentos.domain.shared.value_objects import arredondar_centavos

from ..dtos.relatorio_dto import FatiaStatusDTO, FornecedorTotalDTO, PainelDTO, RelatorioDTO

# Numeros de documento que a planilha antiga usava como "vazio".
_DOCUMENTO_VAZIO = ["", "---", "000"]
_MAX_FORNECEDORES_PAINEL = 5

_SCHEMA = {
    "fornecedor": pl.Utf8,
    "solicitacao_no": pl.Utf8,
    "pedido_no": pl.Utf8,
    "status": pl.Utf8,
    "prioridade": pl.Utf8,
    "centavos": pl.Int64,
}


def pedidos_para_dataframe(pedidos: list[Pedido]) -> pl.DataFrame:
    """Pedidos ativos (nao arquivados) como DataFrame, na ordem da lista."""
    ativos = [p for p in pedidos if not p.arquivado]
    return pl.DataFrame(
        {
            "fornecedor": [p.fornecedor for p in ativos],
            "solicitacao_no": [p.solicitacao_no for p in ativos],
            "pedido_no": [p.pedido_no for p in ativos],
            "status": [p.status.value for p in ativos],
            "prioridade": [p.prioridade.value for p in ativos],
            "centavos": [int(p.valor * 100) for p in ativos],
        },
        schema=_SCHEMA,
    )


def _reais(centavos: int | None) -> Decimal:
    return (Decimal(centavos or 0) / 100).quantize(Decimal("0.01"))


class RelatorioService:
    def painel(self, pedidos: list[Pedido]) -> PainelDTO:
        df = pedidos_para_dataframe(pedidos)
        fornecedores = (
            df.group_by("fornecedor", maintain_order=True)
            .agg(pl.col("centavos").sum())
            .head(_MAX_FORNECEDORES_PAINEL)
        )
        return PainelDTO(
            total_provisionado=str(_reais(df["centavos"].sum())),
            urgentes=df.filter(pl.col("prioridade") == Prioridade.URGENTE.value).height,
            pendentes_nf=df.filter(pl.col("status") != StatusPedido.NF_RECEBIDA.value).height,
            total_pedidos=df.height,
            principais_fornecedores=[
                FornecedorTotalDTO(fornecedor=row["fornecedor"], valor=str(_reais(row["centavos"])))
                for row in fornecedores.iter_rows(named=True)
            ],
        )

    def relatorio(self, pedidos: list[Pedido]) -> RelatorioDTO:
        df = pedidos_para_dataframe(pedidos)
        notas = df.filter(pl.col("status") == StatusPedido.NF_RECEBIDA.value).height
        pendentes = df.height - notas
        cancelados = df.filter(pl.col("status") == StatusPedido.CANCELADO.value).height
        total = _reais(df["centavos"].sum())
        return RelatorioDTO(
            solicitacoes=df.filter(~pl.col("solicitacao_no").is_in(_DOCUMENTO_VAZIO)).height,
            pedidos_emitidos=df.filter(~pl.col("pedido_no").is_in(_DOCUMENTO_VAZIO)).height,
            notas_recebidas=notas,
            pendentes=pendentes,
            cancelados=cancelados,
            valor_total=str(total),
            media_por_pedido=str(arredondar_centavos(total / max(df.height, 1))),
            distribuicao_status=[
                FatiaStatusDTO(nome="NF Recebida", quantidade=notas),
                FatiaStatusDTO(nome="Pendente", quantidade=pendentes),
                FatiaStatusDTO(nome="Cancelado", quantidade=cancelados),
            ],
        )
