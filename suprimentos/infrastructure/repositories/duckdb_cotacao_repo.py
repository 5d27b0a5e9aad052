from __future__ import annotations

import json
from datetime import date
from typing import Any

import duckdb

from suprimentos.domain.cotacao.entities import CotacaoFornecedor, ItemCotacao, MapaCotacao
from suprimentos.domain.cotacao.recalculo import recalcular_item
from suprimentos.domain.cotacao.value_objects import StatusCotacao
from suprimentos.domain.shared.value_objects import para_decimal, para_inteiro
from suprimentos.infrastructure.log import log

from ._json import data_iso, data_ou_none, decimal_str
from .documento_store import DuckDBDocumentoStore, preservar_ilegiveis

CHAVE_COTACOES = "supply_quotations_list"


class DuckDBMapaCotacaoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._store = DuckDBDocumentoStore(conn)

    def listar(self) -> list[MapaCotacao]:
        return self._carregar()[0]

    def salvar_todos(self, mapas: list[MapaCotacao]) -> None:
        _, ilegiveis = self._carregar()
        docs = preservar_ilegiveis([self._para_documento(m) for m in mapas], ilegiveis)
        self._store.gravar(CHAVE_COTACOES, json.dumps(docs, ensure_ascii=False))

    def _carregar(self) -> tuple[list[MapaCotacao], list[Any]]:
        # versoes antigas gravavam um unico mapa
        mapas: list[MapaCotacao] = []
        ilegiveis: list[Any] = []
        for doc in self._store.ler_lista(CHAVE_COTACOES, aceitar_objeto=True):
            try:
                mapas.append(self._hidratar(doc))
            except (ValueError, TypeError, KeyError, AttributeError) as err:
                log(f"Mapa de cotacao mantido sem carregar: {err}", origem="armazenamento")
                ilegiveis.append(doc)
        return mapas, ilegiveis

    def _hidratar(self, doc: dict[str, Any]) -> MapaCotacao:
        # derivados (total, menorValor, vencedor) sao recalculados, nunca confiados
        itens = tuple(
            recalcular_item(
                ItemCotacao(
                    id=str(it["id"]),
                    codigo=str(it.get("codigo") or ""),
                    part_number=str(it.get("partNumber") or ""),
                    descricao=str(it.get("descricao") or ""),
                    unidade=str(it.get("unidade") or "UN"),
                    quantidade=max(0, para_inteiro(it.get("quantidade"))),
                    fornecedores=tuple(
                        CotacaoFornecedor(
                            id=str(f["id"]),
                            nome=str(f.get("nome") or ""),
                            marca=str(f.get("marca") or ""),
                            valor_unit=para_decimal(f.get("valorUnit")),
                            difal=para_decimal(f.get("difal")),
                        )
                        for f in it.get("fornecedores") or []
                    ),
                )
            )
            for it in doc.get("itens") or []
        )
        return MapaCotacao(
            id=str(doc["id"]),
            titulo=str(doc.get("titulo") or ""),
            data=data_ou_none(doc.get("data")) or date.today(),
            solicitante=str(doc.get("solicitante") or ""),
            departamento=str(doc.get("departamento") or ""),
            status=StatusCotacao(doc.get("status") or StatusCotacao.PENDENTE),
            tag_equipamento=str(doc.get("tagEquipamento") or ""),
            prazo_entrega=data_ou_none(doc.get("prazoEntrega")),
            itens=itens,
        )

    def _para_documento(self, m: MapaCotacao) -> dict[str, Any]:
        return {
            "id": m.id,
            "titulo": m.titulo,
            "data": data_iso(m.data),
            "solicitante": m.solicitante,
            "departamento": m.departamento,
            "status": m.status.value,
            "tagEquipamento": m.tag_equipamento,
            "prazoEntrega": data_iso(m.prazo_entrega),
            "itens": [
                {
                    "id": it.id,
                    "codigo": it.codigo,
                    "partNumber": it.part_number,
                    "descricao": it.descricao,
                    "unidade": it.unidade,
                    "quantidade": it.quantidade,
                    "menorValor": decimal_str(it.menor_valor),
                    "vencedor": it.vencedor,
                    "fornecedores": [
                        {
                            "id": f.id,
                            "nome": f.nome,
                            "marca": f.marca,
                            "valorUnit": decimal_str(f.valor_unit),
                            "difal": decimal_str(f.difal),
                            "total": decimal_str(f.total),
                        }
                        for f in it.fornecedores
                    ],
                }
                for it in m.itens
            ],
        }
