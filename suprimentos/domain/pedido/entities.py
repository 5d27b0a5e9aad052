from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from .value_objects import Prioridade, StatusAtraso, StatusPedido


@dataclass(frozen=True)
class Parcela:
    numero: int  # 1-based, igual a posicao na lista
    vencimento: date
    valor: Decimal
    paga: bool = False


@dataclass(frozen=True)
class Pedido:
    """Ciclo SC -> PD -> NF de uma compra.

    Soma das parcelas == valor apenas quando geradas pelo parcelamento;
    edicoes manuais de parcela podem quebrar a igualdade (aceito).
    """

    id: str
    solicitacao_no: str
    fornecedor: str
    valor: Decimal
    data_solicitacao: date
    vencimento_nf: date
    pedido_no: str = ""
    nf_no: str = ""
    previsao_entrega: date | None = None
    quantidade_parcelas: int = 1
    prioridade: Prioridade = Prioridade.NORMAL
    status: StatusPedido = StatusPedido.SOLICITADO
    status_atraso: StatusAtraso = StatusAtraso.NO_PRAZO
    responsavel: str = ""
    observacoes: str = ""
    arquivado: bool = False
    parcelas: tuple[Parcela, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.solicitacao_no.strip():
            raise ValueError("Numero da solicitacao e obrigatorio")
        if self.valor < Decimal("0"):
            raise ValueError("Valor do pedido nao pode ser negativo")

    def corresponde(self, termo: str) -> bool:
        """Busca textual por fornecedor, SC, PD ou NF (case-insensitive)."""
        if not termo:
            return True
        termo = termo.lower()
        campos = (self.fornecedor, self.solicitacao_no, self.pedido_no, self.nf_no)
        return any(termo in c.lower() for c in campos)

    @property
    def soma_parcelas(self) -> Decimal:
        return sum((p.valor for p in self.parcelas), Decimal("0"))
