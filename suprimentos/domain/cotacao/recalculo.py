from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from suprimentos.domain.shared.value_objects import ZERO, arredondar_centavos, para_decimal

from .entities import CotacaoFornecedor, ItemCotacao
from .value_objects import SEPARADOR_VENCEDORES

_CEM = Decimal("100")


def calcular_total(quantidade: int, valor_unit: Decimal, difal: Decimal) -> Decimal:
    """quantidade x unitario + DIFAL%, em centavos. Unitario <= 0 = nao cotado = 0."""
    if valor_unit <= ZERO:
        return ZERO
    subtotal = quantidade * valor_unit
    return arredondar_centavos(subtotal + subtotal * (difal / _CEM))


def recalcular_item(item: ItemCotacao) -> ItemCotacao:
    """Recalcula totais, menor valor e vencedor(es) de um item. Puro e idempotente.

    Empates no menor total sao intencionais: todos os empatados vencem, na
    ordem original das colunas.
    """
    fornecedores: list[CotacaoFornecedor] = []
    for f in item.fornecedores:
        valor_unit = para_decimal(f.valor_unit)
        difal = para_decimal(f.difal)
        fornecedores.append(
            replace(
                f,
                valor_unit=valor_unit,
                difal=difal,
                total=calcular_total(item.quantidade, valor_unit, difal),
            )
        )

    validos = [f.total for f in fornecedores if f.total > ZERO]
    menor = min(validos) if validos else ZERO
    vencedores = [f.nome for f in fornecedores if f.total > ZERO and f.total == menor]

    return replace(
        item,
        fornecedores=tuple(fornecedores),
        menor_valor=menor,
        vencedor=SEPARADOR_VENCEDORES.join(vencedores),
    )
