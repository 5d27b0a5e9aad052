from __future__ import annotations

from typing import Protocol

from suprimentos.domain.cotacao.entities import MapaCotacao
from suprimentos.domain.pedido.entities import Pedido

from ..dtos.relatorio_dto import ResumoDTO
from .cotacao_service import CotacaoService
from .pedido_service import PedidoService


class Resumidor(Protocol):
    def resumir(self, alvo: list[Pedido] | MapaCotacao) -> str: ...


class ResumoService:
    def __init__(
        self,
        pedido_service: PedidoService,
        cotacao_service: CotacaoService,
        resumidor: Resumidor,
    ) -> None:
        self._pedidos = pedido_service
        self._cotacoes = cotacao_service
        self._resumidor = resumidor

    def resumir_carteira(self) -> ResumoDTO:
        return ResumoDTO(texto=self._resumidor.resumir(self._pedidos.listar()))

    def analisar_mapa(self, mapa_id: str) -> ResumoDTO:
        return ResumoDTO(texto=self._resumidor.resumir(self._cotacoes.obter(mapa_id)))
