from __future__ import annotations

from datetime import date
from decimal import Decimal


def data_ou_none(raw: object) -> date | None:
    """'2026-01-15' -> date. Vazio, 'A COMBINAR' ou invalido -> None."""
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None


def data_iso(valor: date | None) -> str:
    return valor.isoformat() if valor else ""


def decimal_str(valor: Decimal) -> str:
    return format(valor, "f")
