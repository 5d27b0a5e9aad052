# suprimentos/infrastructure/gemini_resumidor.py
#
# Natural-language summaries of the order portfolio and of quotation maps,
# produced by Gemini through the google-generativeai SDK.
#
# Invariants:
#   - resumir() never raises. Any failure (no API key, timeout, API error,
#     blocked or empty response) collapses into the fixed fallback text for
#     the kind of input. There is no retry.
#   - Nothing in the domain waits on this; callers ask for it explicitly.
from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable
from typing import Any

import google.generativeai as genai

from suprimentos.domain.cotacao.entities import MapaCotacao
from suprimentos.domain.pedido.entities import Pedido

from .config import Settings, get_settings
from .log import log

FALLBACK_RESUMO = "Resumo indisponível."
FALLBACK_ANALISE = "Não foi possível realizar a análise no momento."

_INSTRUCAO_RESUMO = (
    "Você é um gestor de suprimentos. Dê um resumo executivo focando em valores totais, "
    "pedidos urgentes e possíveis gargalos nas NFs."
)
_INSTRUCAO_ANALISE = (
    "Você é um consultor sênior de compras e suprimentos. Analise os preços, sugira o melhor "
    "fornecedor custo-benefício e aponte riscos potenciais."
)

# (nome do modelo, instrucao de sistema) -> objeto com generate_content()
CriarModelo = Callable[[str, str], Any]


class ResumoIndisponivel(Exception):
    pass


def _para_json(alvo: list[Pedido] | MapaCotacao) -> str:
    dados = [dataclasses.asdict(p) for p in alvo] if isinstance(alvo, list) else dataclasses.asdict(alvo)
    return json.dumps(dados, default=str, ensure_ascii=False)


class GeminiResumidor:
    def __init__(self, settings: Settings | None = None, criar_modelo: CriarModelo | None = None) -> None:
        self._settings = settings or get_settings()
        self._criar_modelo = criar_modelo or self._modelo_gemini

    def resumir(self, alvo: list[Pedido] | MapaCotacao) -> str:
        """Resumo da carteira (lista de pedidos) ou analise de um mapa de cotacao."""
        if isinstance(alvo, MapaCotacao):
            modelo = self._settings.gemini_modelo_analise
            instrucao = _INSTRUCAO_ANALISE
            prompt = (
                "Analise este Mapa de Cotação de Suprimentos e forneça uma recomendação "
                f"estratégica baseada em economia e confiabilidade: {_para_json(alvo)}"
            )
            fallback = FALLBACK_ANALISE
        else:
            modelo = self._settings.gemini_modelo_resumo
            instrucao = _INSTRUCAO_RESUMO
            prompt = f"Resuma o status atual desta carteira de pedidos: {_para_json(alvo)}"
            fallback = FALLBACK_RESUMO

        try:
            return self._gerar(modelo, instrucao, prompt)
        except Exception as err:  # noqa: BLE001
            log(f"Erro na analise da IA ({modelo}): {err}", origem="ia")
            return fallback

    def _modelo_gemini(self, modelo: str, instrucao: str) -> Any:
        genai.configure(api_key=self._settings.gemini_api_key)
        return genai.GenerativeModel(model_name=modelo, system_instruction=instrucao)

    def _gerar(self, modelo: str, instrucao: str, prompt: str) -> str:
        if not self._settings.gemini_api_key:
            raise ResumoIndisponivel("GEMINI_API_KEY nao configurada")

        response = self._criar_modelo(modelo, instrucao).generate_content(
            prompt,
            request_options={"timeout": self._settings.gemini_timeout},
        )
        # .text levanta ValueError quando a resposta foi bloqueada ou veio sem partes
        texto = (response.text or "").strip()
        if not texto:
            raise ResumoIndisponivel("resposta sem texto")
        return texto
