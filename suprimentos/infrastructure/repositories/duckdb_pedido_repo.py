from __future__ import annotations

import json
from datetime import date
from typing import Any

import duckdb

from suprimentos.domain.pedido.entities import Parcela, Pedido
from suprimentos.domain.pedido.value_objects import Prioridade, StatusAtraso, StatusPedido
from suprimentos.domain.shared.value_objects import arredondar_centavos, para_decimal, para_inteiro
from suprimentos.infrastructure.log import log

from ._json import data_iso, data_ou_none, decimal_str
from .documento_store import DuckDBDocumentoStore, preservar_ilegiveis

CHAVE_PEDIDOS = "supply_orders"


class DuckDBPedidoRepo:
    """Colecao de pedidos gravada como um unico documento JSON.

    Formato de campos compativel com o export do navegador (camelCase).
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._store = DuckDBDocumentoStore(conn)

    def listar(self) -> list[Pedido]:
        return self._carregar()[0]

    def salvar_todos(self, pedidos: list[Pedido]) -> None:
        _, ilegiveis = self._carregar()
        docs = preservar_ilegiveis([self._para_documento(p) for p in pedidos], ilegiveis)
        self._store.gravar(CHAVE_PEDIDOS, json.dumps(docs, ensure_ascii=False))

    def _carregar(self) -> tuple[list[Pedido], list[Any]]:
        """Pedidos validos e, a parte, os registros brutos que nao puderam ser lidos."""
        pedidos: list[Pedido] = []
        ilegiveis: list[Any] = []
        for doc in self._store.ler_lista(CHAVE_PEDIDOS):
            try:
                pedidos.append(self._hidratar(doc))
            except (ValueError, TypeError, KeyError, AttributeError) as err:
                log(f"Pedido mantido sem carregar: {err}", origem="armazenamento")
                ilegiveis.append(doc)
        return pedidos, ilegiveis

    def _hidratar(self, doc: dict[str, Any]) -> Pedido:
        hoje = date.today()
        return Pedido(
            id=str(doc["id"]),
            solicitacao_no=str(doc.get("solicitacaoNo") or ""),
            pedido_no=str(doc.get("pedidoNo") or ""),
            nf_no=str(doc.get("nfNo") or ""),
            fornecedor=str(doc.get("fornecedor") or ""),
            valor=arredondar_centavos(para_decimal(doc.get("valor"))),
            data_solicitacao=data_ou_none(doc.get("dataSolicitacao")) or hoje,
            vencimento_nf=data_ou_none(doc.get("vencimentoNF")) or hoje,
            previsao_entrega=data_ou_none(doc.get("previsaoEntrega")),
            quantidade_parcelas=max(1, para_inteiro(doc.get("parcelas", 1))),
            prioridade=Prioridade(doc.get("prioridade") or Prioridade.NORMAL),
            status=StatusPedido(doc.get("status") or StatusPedido.SOLICITADO),
            status_atraso=StatusAtraso(doc.get("statusAtraso") or StatusAtraso.NO_PRAZO),
            responsavel=str(doc.get("responsavel") or ""),
            observacoes=str(doc.get("observacoes") or ""),
            arquivado=bool(doc.get("isArchived", False)),
            parcelas=tuple(
                Parcela(
                    numero=para_inteiro(p.get("numero")),
                    vencimento=data_ou_none(p.get("vencimento")) or hoje,
                    valor=arredondar_centavos(para_decimal(p.get("valor"))),
                    paga=bool(p.get("paga", False)),
                )
                for p in doc.get("listaParcelas") or []
            ),
        )

    def _para_documento(self, p: Pedido) -> dict[str, Any]:
        return {
            "id": p.id,
            "solicitacaoNo": p.solicitacao_no,
            "pedidoNo": p.pedido_no,
            "nfNo": p.nf_no,
            "fornecedor": p.fornecedor,
            "valor": decimal_str(p.valor),
            "dataSolicitacao": data_iso(p.data_solicitacao),
            "vencimentoNF": data_iso(p.vencimento_nf),
            "previsaoEntrega": data_iso(p.previsao_entrega),
            "parcelas": p.quantidade_parcelas,
            "prioridade": p.prioridade.value,
            "status": p.status.value,
            "statusAtraso": p.status_atraso.value,
            "responsavel": p.responsavel,
            "observacoes": p.observacoes,
            "isArchived": p.arquivado,
            "listaParcelas": [
                {
                    "numero": parc.numero,
                    "vencimento": data_iso(parc.vencimento),
                    "valor": decimal_str(parc.valor),
                    "paga": parc.paga,
                }
                for parc in p.parcelas
            ],
        }
