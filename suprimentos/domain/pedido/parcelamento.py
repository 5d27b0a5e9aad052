from __future__ import annotations

import calendar
from datetime import date
from decimal import Decimal

from suprimentos.domain.shared.value_objects import arredondar_centavos, para_decimal

from .entities import Parcela


def somar_meses(inicio: date, meses: int) -> date:
    """Mesmo dia do mes, limitado ao ultimo dia do mes de destino (31/01 + 1 -> 28/02)."""
    indice = inicio.month - 1 + meses
    ano = inicio.year + indice // 12
    mes = indice % 12 + 1
    ultimo_dia = calendar.monthrange(ano, mes)[1]
    return date(ano, mes, min(inicio.day, ultimo_dia))


def gerar_parcelas(total: Decimal, quantidade: int, data_inicial: date) -> tuple[Parcela, ...]:
    """Divide total em parcelas mensais; a ultima absorve o resto do arredondamento.

    Puro. quantidade >= 1 e responsabilidade do chamador.
    Datas sao calculadas sempre a partir de data_inicial, nunca encadeadas,
    para que 31/01 gere 28/02 e depois 31/03.
    """
    total = arredondar_centavos(para_decimal(total))
    base = arredondar_centavos(total / quantidade)
    parcelas: list[Parcela] = []
    for i in range(quantidade):
        ultima = i == quantidade - 1
        valor = total - base * (quantidade - 1) if ultima else base
        parcelas.append(
            Parcela(
                numero=i + 1,
                vencimento=somar_meses(data_inicial, i),
                valor=valor,
            )
        )
    return tuple(parcelas)
