from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from suprimentos.domain.pedido.entities import Pedido
from suprimentos.domain.pedido.value_objects import Prioridade, StatusPedido

# Valores monetarios chegam como texto ou numero; nao numerico vira 0 no servico.
ValorEntrada = str | int | float | None

# 30 anos de parcelas mensais
MAX_PARCELAS = 360


class ParcelaDTO(BaseModel):
    numero: int
    vencimento: str
    valor: str  # Decimal serializado como string
    paga: bool


class PedidoDTO(BaseModel):
    id: str
    solicitacao_no: str
    pedido_no: str
    nf_no: str
    fornecedor: str
    valor: str
    data_solicitacao: str
    vencimento_nf: str
    previsao_entrega: str | None
    quantidade_parcelas: int
    prioridade: str
    status: str
    status_atraso: str
    responsavel: str
    observacoes: str
    arquivado: bool
    parcelas: list[ParcelaDTO]

    @classmethod
    def from_domain(cls, p: Pedido) -> PedidoDTO:
        return cls(
            id=p.id,
            solicitacao_no=p.solicitacao_no,
            pedido_no=p.pedido_no,
            nf_no=p.nf_no,
            fornecedor=p.fornecedor,
            valor=str(p.valor),
            data_solicitacao=p.data_solicitacao.isoformat(),
            vencimento_nf=p.vencimento_nf.isoformat(),
            previsao_entrega=p.previsao_entrega.isoformat() if p.previsao_entrega else None,
            quantidade_parcelas=p.quantidade_parcelas,
            prioridade=p.prioridade.value,
            status=p.status.value,
            status_atraso=p.status_atraso.value,
            responsavel=p.responsavel,
            observacoes=p.observacoes,
            arquivado=p.arquivado,
            parcelas=[
                ParcelaDTO(
                    numero=parc.numero,
                    vencimento=parc.vencimento.isoformat(),
                    valor=str(parc.valor),
                    paga=parc.paga,
                )
                for parc in p.parcelas
            ],
        )


class PedidoFormDTO(BaseModel):
    """Dados do formulario de pedido. Datas ausentes usam o dia corrente."""

    solicitacao_no: str = Field(min_length=1)
    fornecedor: str = Field(min_length=1)
    valor: ValorEntrada = 0
    pedido_no: str = ""
    nf_no: str = ""
    data_solicitacao: date | None = None
    vencimento_nf: date | None = None
    previsao_entrega: date | None = None
    parcelas: int = Field(default=1, le=MAX_PARCELAS)
    prioridade: Prioridade = Prioridade.NORMAL
    status: StatusPedido = StatusPedido.SOLICITADO
    responsavel: str | None = None
    observacoes: str = ""


class SimulacaoParcelasDTO(BaseModel):
    valor: ValorEntrada = 0
    parcelas: int = Field(default=1, le=MAX_PARCELAS)
    vencimento_nf: date | None = None


class ParcelaEdicaoDTO(BaseModel):
    vencimento: date | None = None
    valor: ValorEntrada = None
    paga: bool | None = None
