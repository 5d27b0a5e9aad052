from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .value_objects import StatusCotacao


@dataclass(frozen=True)
class CotacaoFornecedor:
    """Preco de um fornecedor para um item. total e derivado (ver recalculo)."""

    id: str
    nome: str
    valor_unit: Decimal = Decimal("0")
    difal: Decimal = Decimal("0")  # percentual
    marca: str = ""
    total: Decimal = Decimal("0")


@dataclass(frozen=True)
class ItemCotacao:
    id: str
    codigo: str
    quantidade: int
    fornecedores: tuple[CotacaoFornecedor, ...]
    descricao: str = ""
    part_number: str = ""
    unidade: str = "UN"
    menor_valor: Decimal = Decimal("0")
    vencedor: str = ""


@dataclass(frozen=True)
class MapaCotacao:
    """Planilha comparativa. Conjunto de fornecedores e posicional: item i e item j
    tem os mesmos fornecedores na mesma ordem, sincronizados por id."""

    id: str
    titulo: str
    data: date
    itens: tuple[ItemCotacao, ...]
    solicitante: str = ""
    departamento: str = ""
    status: StatusCotacao = StatusCotacao.PENDENTE
    tag_equipamento: str = ""
    prazo_entrega: date | None = None

    @property
    def fornecedores(self) -> tuple[CotacaoFornecedor, ...]:
        """Fornecedores do primeiro item, que definem as colunas do mapa."""
        return self.itens[0].fornecedores if self.itens else ()

    @property
    def total_melhores_precos(self) -> Decimal:
        return sum((i.menor_valor for i in self.itens), Decimal("0"))
