from __future__ import annotations

import json
from typing import Any

import duckdb

from suprimentos.infrastructure.log import log


class DuckDBDocumentoStore:
    """Chave -> documento JSON. Cada gravacao substitui o documento inteiro."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def ler(self, chave: str) -> str | None:
        row = self._conn.execute(
            "SELECT valor FROM documento WHERE chave = ?",
            [chave],
        ).fetchone()
        return str(row[0]) if row else None

    def ler_lista(self, chave: str, aceitar_objeto: bool = False) -> list[Any]:
        """Documento como lista. Ausente ou corrompido -> []. Com aceitar_objeto,
        um objeto unico gravado por versoes antigas vira lista de um elemento."""
        raw = self.ler(chave)
        if raw is None:
            return []
        try:
            docs = json.loads(raw)
        except json.JSONDecodeError:
            log(f"Documento '{chave}' corrompido, usando lista vazia", origem="armazenamento")
            return []
        if aceitar_objeto and isinstance(docs, dict):
            docs = [docs]
        if not isinstance(docs, list):
            log(f"Documento '{chave}' nao e uma lista, usando lista vazia", origem="armazenamento")
            return []
        return docs

    def gravar(self, chave: str, valor: str) -> None:
        self._conn.execute(
            """
            INSERT INTO documento (chave, valor, atualizado_em)
            VALUES (?, ?, CURRENT_TIMESTAMP)
            ON CONFLICT (chave) DO UPDATE
            SET valor = excluded.valor, atualizado_em = excluded.atualizado_em
        """,
            [chave, valor],
        )


def preservar_ilegiveis(docs: list[dict[str, Any]], ilegiveis: list[Any]) -> list[Any]:
    """Acrescenta os registros que nao carregaram, para que uma gravacao nunca os apague.

    Um registro ilegivel cujo id foi regravado em docs e descartado.
    """
    ids = {str(d["id"]) for d in docs}
    return [*docs, *(d for d in ilegiveis if not (isinstance(d, dict) and str(d.get("id")) in ids))]
