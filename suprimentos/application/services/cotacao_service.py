from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import replace
from datetime import date

from suprimentos.domain.cotacao import services as mapa_ops
from suprimentos.domain.cotacao.entities import CotacaoFornecedor, MapaCotacao
from suprimentos.domain.cotacao.repository import MapaCotacaoRepository
from suprimentos.domain.cotacao.value_objects import StatusCotacao

from ..dtos.cotacao_dto import CotacaoEdicaoDTO, ItemEdicaoDTO, MapaCabecalhoDTO

TITULO_PADRAO = "NOVA COTAÇÃO DE MATERIAIS"
FORNECEDORES_INICIAIS = 3


class MapaNaoEncontrado(LookupError):
    pass


class CotacaoService:
    """Cada operacao le a colecao, aplica uma funcao pura ao mapa e grava a colecao."""

    def __init__(
        self,
        mapa_repo: MapaCotacaoRepository,
        solicitante_padrao: str = "",
        departamento_padrao: str = "",
        rng: random.Random | None = None,
    ) -> None:
        self._repo = mapa_repo
        self._solicitante_padrao = solicitante_padrao
        self._departamento_padrao = departamento_padrao
        self._rng = rng or random.Random()

    def listar(self) -> list[MapaCotacao]:
        return self._repo.listar()

    def obter(self, mapa_id: str) -> MapaCotacao:
        for m in self._repo.listar():
            if m.id == mapa_id:
                return m
        raise MapaNaoEncontrado(mapa_id)

    def criar(self, hoje: date | None = None) -> MapaCotacao:
        """Mapa novo com um item e tres fornecedores em branco, no topo da lista."""
        existentes = self._repo.listar()
        fornecedores = tuple(
            CotacaoFornecedor(id=mapa_ops.novo_id(), nome=f"FORNECEDOR {n}")
            for n in range(1, FORNECEDORES_INICIAIS + 1)
        )
        mapa = MapaCotacao(
            id=self._novo_mapa_id({m.id for m in existentes}),
            titulo=TITULO_PADRAO,
            data=hoje or date.today(),
            solicitante=self._solicitante_padrao,
            departamento=self._departamento_padrao,
            status=StatusCotacao.PENDENTE,
            itens=(mapa_ops.novo_item("001", fornecedores),),
        )
        self._repo.salvar_todos([mapa, *existentes])
        return mapa

    def excluir(self, mapa_id: str) -> None:
        mapas = self._repo.listar()
        restantes = [m for m in mapas if m.id != mapa_id]
        if len(restantes) == len(mapas):
            raise MapaNaoEncontrado(mapa_id)
        self._repo.salvar_todos(restantes)

    def atualizar_cabecalho(self, mapa_id: str, dados: MapaCabecalhoDTO) -> MapaCotacao:
        def _editar(m: MapaCotacao) -> MapaCotacao:
            campos: dict[str, object] = {}
            if dados.titulo is not None:
                campos["titulo"] = dados.titulo.upper()
            if dados.solicitante is not None:
                campos["solicitante"] = dados.solicitante.upper()
            if dados.departamento is not None:
                campos["departamento"] = dados.departamento.upper()
            if dados.tag_equipamento is not None:
                campos["tag_equipamento"] = dados.tag_equipamento.upper()
            if dados.status is not None:
                campos["status"] = dados.status
            if dados.data is not None:
                campos["data"] = dados.data
            if "prazo_entrega" in dados.model_fields_set:
                campos["prazo_entrega"] = dados.prazo_entrega
            return replace(m, **campos)  # type: ignore[arg-type]

        return self._aplicar(mapa_id, _editar)

    def adicionar_item(self, mapa_id: str) -> MapaCotacao:
        return self._aplicar(mapa_id, mapa_ops.adicionar_item)

    def remover_item(self, mapa_id: str, item_id: str) -> MapaCotacao:
        return self._aplicar(mapa_id, lambda m: mapa_ops.remover_item(m, item_id))

    def atualizar_item(self, mapa_id: str, item_id: str, dados: ItemEdicaoDTO) -> MapaCotacao:
        return self._aplicar(
            mapa_id,
            lambda m: mapa_ops.atualizar_item(
                m,
                item_id,
                descricao=dados.descricao,
                part_number=dados.part_number,
                unidade=dados.unidade,
                quantidade=dados.quantidade,
            ),
        )

    def atualizar_cotacao(
        self,
        mapa_id: str,
        item_id: str,
        fornecedor_id: str,
        dados: CotacaoEdicaoDTO,
    ) -> MapaCotacao:
        return self._aplicar(
            mapa_id,
            lambda m: mapa_ops.atualizar_cotacao(
                m,
                item_id,
                fornecedor_id,
                valor_unit=dados.valor_unit,
                difal=dados.difal,
                marca=dados.marca,
            ),
        )

    def adicionar_fornecedor(self, mapa_id: str) -> MapaCotacao:
        return self._aplicar(mapa_id, mapa_ops.adicionar_fornecedor)

    def remover_fornecedor(self, mapa_id: str, fornecedor_id: str) -> MapaCotacao:
        return self._aplicar(mapa_id, lambda m: mapa_ops.remover_fornecedor(m, fornecedor_id))

    def renomear_fornecedor(self, mapa_id: str, fornecedor_id: str, nome: str) -> MapaCotacao:
        return self._aplicar(mapa_id, lambda m: mapa_ops.renomear_fornecedor(m, fornecedor_id, nome))

    def _aplicar(self, mapa_id: str, fn: Callable[[MapaCotacao], MapaCotacao]) -> MapaCotacao:
        mapas = self._repo.listar()
        atual = next((m for m in mapas if m.id == mapa_id), None)
        if atual is None:
            raise MapaNaoEncontrado(mapa_id)
        novo = fn(atual)
        if novo is not atual:
            self._repo.salvar_todos([novo if m.id == mapa_id else m for m in mapas])
        return novo

    def _novo_mapa_id(self, existentes: set[str]) -> str:
        while True:
            candidato = f"MAP-{self._rng.randint(100000, 999999)}"
            if candidato not in existentes:
                return candidato
