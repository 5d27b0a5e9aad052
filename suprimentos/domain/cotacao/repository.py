from __future__ import annotations

from typing import Protocol

from .entities import MapaCotacao


class MapaCotacaoRepository(Protocol):
    def listar(self) -> list[MapaCotacao]: ...

    def salvar_todos(self, mapas: list[MapaCotacao]) -> None: ...
