from enum import StrEnum


class StatusCotacao(StrEnum):
    PENDENTE = "PENDENTE"
    AGUARDANDO_APROVACAO = "AGUARDANDO AP."
    APROVADO = "APROVADO"
    REPROVADO = "REPROVADO"


SEPARADOR_VENCEDORES = " / "
