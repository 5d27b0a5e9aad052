from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENTAVO = Decimal("0.01")
ZERO = Decimal("0")
# Acima disso a entrada e tratada como digitacao invalida, nao como valor.
LIMITE = Decimal("1e12")


def para_decimal(raw: object) -> Decimal:
    """Converte entrada de formulario em Decimal. Ausente, nao numerico ou fora do limite vira 0."""
    if raw is None or isinstance(raw, bool):
        return ZERO
    if isinstance(raw, Decimal):
        valor = raw
    else:
        try:
            valor = Decimal(str(raw).strip().replace(",", "."))
        except (InvalidOperation, ValueError):
            return ZERO
    if not valor.is_finite() or abs(valor) >= LIMITE:
        return ZERO
    return valor


def arredondar_centavos(valor: Decimal) -> Decimal:
    """Meio centavo arredonda para longe do zero. Magnitude que nao cabe em centavos vira 0."""
    try:
        return valor.quantize(CENTAVO, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return ZERO


def para_inteiro(raw: object) -> int:
    """Quantidades de formulario: nao numerico ou fora do limite vira 0, fracao e truncada."""
    if raw is None or isinstance(raw, bool):
        return 0
    try:
        valor = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        return 0
    if not valor.is_finite() or abs(valor) >= LIMITE:
        return 0
    return int(valor)


def formatar_reais(valor: Decimal) -> str:
    """R$ 1.234,56"""
    texto = f"{arredondar_centavos(valor):,.2f}"
    return "R$ " + texto.replace(",", "_").replace(".", ",").replace("_", ".")
