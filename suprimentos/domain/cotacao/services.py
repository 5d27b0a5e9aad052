# suprimentos/domain/cotacao/services.py
#
# Map-level operations over a MapaCotacao. Every function takes the current
# map and returns a new one; nothing is mutated in place.
#
# Invariants:
#   - Every item of a map carries the same supplier ids in the same order.
#     Supplier add/remove/rename fans out to every item in a single new map,
#     so callers never observe a partially updated map.
#   - Every item returned here has already passed through recalcular_item.
#   - A map keeps at least one supplier and at least one item; removals that
#     would break this return the map unchanged.
from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import replace

from suprimentos.domain.shared.value_objects import para_decimal, para_inteiro

from .entities import CotacaoFornecedor, ItemCotacao, MapaCotacao
from .recalculo import recalcular_item


class ItemNaoEncontrado(LookupError):
    pass


def novo_id() -> str:
    return uuid.uuid4().hex[:9]


def _mapear_itens(mapa: MapaCotacao, fn: Callable[[ItemCotacao], ItemCotacao]) -> MapaCotacao:
    return replace(mapa, itens=tuple(recalcular_item(fn(it)) for it in mapa.itens))


def adicionar_fornecedor(mapa: MapaCotacao, gerar_id: Callable[[], str] = novo_id) -> MapaCotacao:
    """Nova coluna zerada 'FORNECEDOR {n}' em todos os itens."""
    fornecedor = CotacaoFornecedor(id=gerar_id(), nome=f"FORNECEDOR {len(mapa.fornecedores) + 1}")
    return _mapear_itens(mapa, lambda it: replace(it, fornecedores=(*it.fornecedores, fornecedor)))


def remover_fornecedor(mapa: MapaCotacao, fornecedor_id: str) -> MapaCotacao:
    """Remove a coluna em todos os itens. No-op se restaria menos de um fornecedor."""
    if len(mapa.fornecedores) <= 1:
        return mapa
    return _mapear_itens(
        mapa,
        lambda it: replace(it, fornecedores=tuple(f for f in it.fornecedores if f.id != fornecedor_id)),
    )


def renomear_fornecedor(mapa: MapaCotacao, fornecedor_id: str, nome: str) -> MapaCotacao:
    nome = nome.upper()
    return _mapear_itens(
        mapa,
        lambda it: replace(
            it,
            fornecedores=tuple(replace(f, nome=nome) if f.id == fornecedor_id else f for f in it.fornecedores),
        ),
    )


def novo_item(
    codigo: str,
    fornecedores: tuple[CotacaoFornecedor, ...],
    gerar_id: Callable[[], str] = novo_id,
) -> ItemCotacao:
    """Item com quantidade 1 e os mesmos fornecedores (ids e nomes), precos zerados."""
    return recalcular_item(
        ItemCotacao(
            id=gerar_id(),
            codigo=codigo,
            quantidade=1,
            fornecedores=tuple(CotacaoFornecedor(id=f.id, nome=f.nome) for f in fornecedores),
        )
    )


def adicionar_item(mapa: MapaCotacao, gerar_id: Callable[[], str] = novo_id) -> MapaCotacao:
    codigo = str(len(mapa.itens) + 1).zfill(3)
    return replace(mapa, itens=(*mapa.itens, novo_item(codigo, mapa.fornecedores, gerar_id)))


def remover_item(mapa: MapaCotacao, item_id: str) -> MapaCotacao:
    """No-op se for o ultimo item do mapa."""
    if len(mapa.itens) <= 1:
        return mapa
    return replace(mapa, itens=tuple(it for it in mapa.itens if it.id != item_id))


def _substituir_item(
    mapa: MapaCotacao,
    item_id: str,
    fn: Callable[[ItemCotacao], ItemCotacao],
) -> MapaCotacao:
    if not any(it.id == item_id for it in mapa.itens):
        raise ItemNaoEncontrado(item_id)
    return replace(
        mapa,
        itens=tuple(recalcular_item(fn(it)) if it.id == item_id else it for it in mapa.itens),
    )


def atualizar_item(
    mapa: MapaCotacao,
    item_id: str,
    *,
    descricao: str | None = None,
    part_number: str | None = None,
    unidade: str | None = None,
    quantidade: object = None,
) -> MapaCotacao:
    """Campos texto em maiusculas; quantidade nao numerica ou negativa vira 0."""

    def _editar(it: ItemCotacao) -> ItemCotacao:
        campos: dict[str, object] = {}
        if descricao is not None:
            campos["descricao"] = descricao.upper()
        if part_number is not None:
            campos["part_number"] = part_number.upper()
        if unidade is not None:
            campos["unidade"] = unidade.upper()
        if quantidade is not None:
            campos["quantidade"] = max(0, para_inteiro(quantidade))
        return replace(it, **campos)  # type: ignore[arg-type]

    return _substituir_item(mapa, item_id, _editar)


def atualizar_cotacao(
    mapa: MapaCotacao,
    item_id: str,
    fornecedor_id: str,
    *,
    valor_unit: object = None,
    difal: object = None,
    marca: str | None = None,
) -> MapaCotacao:
    """Edita o preco de um fornecedor em um unico item e recalcula o item."""

    def _editar_fornecedor(f: CotacaoFornecedor) -> CotacaoFornecedor:
        if f.id != fornecedor_id:
            return f
        campos: dict[str, object] = {}
        if valor_unit is not None:
            campos["valor_unit"] = para_decimal(valor_unit)
        if difal is not None:
            campos["difal"] = para_decimal(difal)
        if marca is not None:
            campos["marca"] = marca.upper()
        return replace(f, **campos)  # type: ignore[arg-type]

    return _substituir_item(
        mapa,
        item_id,
        lambda it: replace(it, fornecedores=tuple(_editar_fornecedor(f) for f in it.fornecedores)),
    )
