from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    gemini_api_key: str
    gemini_modelo_resumo: str
    gemini_modelo_analise: str
    gemini_timeout: float
    empresa_nome: str
    responsavel_padrao: str
    departamento_padrao: str
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        gemini_api_key=os.environ.get("GEMINI_API_KEY", ""),
        gemini_modelo_resumo=os.environ.get("GEMINI_MODELO_RESUMO", "gemini-3-flash-preview"),
        gemini_modelo_analise=os.environ.get("GEMINI_MODELO_ANALISE", "gemini-3-pro-preview"),
        gemini_timeout=float(os.environ.get("GEMINI_TIMEOUT", "30")),
        empresa_nome=os.environ.get("EMPRESA_NOME", "JULY QUARTZO TRANSPORTES E SERVIÇOS LTDA"),
        responsavel_padrao=os.environ.get("RESPONSAVEL_PADRAO", "MAURICIO"),
        departamento_padrao=os.environ.get("DEPARTAMENTO_PADRAO", "SUPRIMENTOS"),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
