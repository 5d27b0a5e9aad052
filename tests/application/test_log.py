import re

import duckdb
import pytest

from suprimentos.infrastructure.log import log
from suprimentos.infrastructure.repositories.documento_store import DuckDBDocumentoStore


def test_linha_com_origem_e_tempo_de_atividade(capsys: pytest.CaptureFixture[str]):
    log("mensagem", origem="ia")
    assert re.fullmatch(r"\[ia \d{2}:\d{2}:\d{2}\] mensagem\n", capsys.readouterr().out)


def test_documento_corrompido_e_registrado(conn: duckdb.DuckDBPyConnection, capsys: pytest.CaptureFixture[str]):
    store = DuckDBDocumentoStore(conn)
    store.gravar("k", "{quebrado")
    assert store.ler_lista("k") == []
    assert "[armazenamento " in capsys.readouterr().out
