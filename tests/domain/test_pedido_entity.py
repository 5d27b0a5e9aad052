from datetime import date
from decimal import Decimal

import pytest

from suprimentos.domain.pedido.entities import Pedido
from suprimentos.domain.shared.value_objects import formatar_reais, para_decimal, para_inteiro


def _pedido(**kwargs: object) -> Pedido:
    dados: dict[str, object] = {
        "id": "1",
        "solicitacao_no": "SC-100",
        "fornecedor": "RODOBENS",
        "valor": Decimal("1500.00"),
        "data_solicitacao": date(2026, 1, 10),
        "vencimento_nf": date(2026, 2, 10),
        "pedido_no": "PD-7",
        "nf_no": "",
    }
    dados.update(kwargs)
    return Pedido(**dados)  # type: ignore[arg-type]


def test_solicitacao_obrigatoria():
    with pytest.raises(ValueError, match="solicitacao"):
        _pedido(solicitacao_no="  ")


def test_valor_negativo_invalido():
    with pytest.raises(ValueError, match="negativo"):
        _pedido(valor=Decimal("-1"))


@pytest.mark.parametrize("termo", ["", "rodo", "sc-1", "PD-7"])
def test_busca_encontra(termo: str):
    assert _pedido().corresponde(termo)


def test_busca_nao_encontra():
    assert not _pedido().corresponde("nf-999")


@pytest.mark.parametrize(
    ("raw", "esperado"),
    [
        ("12.5", Decimal("12.5")),
        ("12,5", Decimal("12.5")),
        (7, Decimal("7")),
        (None, Decimal("0")),
        ("", Decimal("0")),
        ("abc", Decimal("0")),
        ("NaN", Decimal("0")),
        (True, Decimal("0")),
    ],
)
def test_para_decimal(raw: object, esperado: Decimal):
    assert para_decimal(raw) == esperado


def test_para_inteiro_trunca_e_coage():
    assert para_inteiro("3.7") == 3
    assert para_inteiro("x") == 0
    assert para_inteiro(None) == 0
    assert para_inteiro("1e30") == 0


def test_formatar_reais():
    assert formatar_reais(Decimal("1234.5")) == "R$ 1.234,50"
    assert formatar_reais(Decimal("0")) == "R$ 0,00"
