from __future__ import annotations

from typing import Protocol

from .entities import Pedido


class PedidoRepository(Protocol):
    def listar(self) -> list[Pedido]: ...

    def salvar_todos(self, pedidos: list[Pedido]) -> None: ...
