from pydantic import BaseModel


class FornecedorTotalDTO(BaseModel):
    fornecedor: str
    valor: str


class FatiaStatusDTO(BaseModel):
    nome: str
    quantidade: int


class PainelDTO(BaseModel):
    total_provisionado: str
    urgentes: int
    pendentes_nf: int
    total_pedidos: int
    principais_fornecedores: list[FornecedorTotalDTO]


class RelatorioDTO(BaseModel):
    solicitacoes: int
    pedidos_emitidos: int
    notas_recebidas: int
    pendentes: int
    cancelados: int
    valor_total: str
    media_por_pedido: str
    distribuicao_status: list[FatiaStatusDTO]


class ResumoDTO(BaseModel):
    texto: str
