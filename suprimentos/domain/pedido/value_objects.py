from enum import StrEnum


class Prioridade(StrEnum):
    NORMAL = "NORMAL"
    ALTA = "ALTA"
    URGENTE = "URGENTE"


class StatusPedido(StrEnum):
    SOLICITADO = "SOLICITADO"
    EM_COTACAO = "EM COTAÇÃO"
    PEDIDO_EMITIDO = "PEDIDO EMITIDO"
    NF_RECEBIDA = "NF RECEBIDA"
    CANCELADO = "CANCELADO"


class StatusAtraso(StrEnum):
    NO_PRAZO = "NO PRAZO"
