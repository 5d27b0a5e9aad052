from __future__ import annotations

from datetime import date

from pydantic import BaseModel

from suprimentos.domain.cotacao.entities import MapaCotacao
from suprimentos.domain.cotacao.value_objects import StatusCotacao

from .pedido_dto import ValorEntrada


class CotacaoFornecedorDTO(BaseModel):
    id: str
    nome: str
    marca: str
    valor_unit: str
    difal: str
    total: str


class ItemCotacaoDTO(BaseModel):
    id: str
    codigo: str
    part_number: str
    descricao: str
    unidade: str
    quantidade: int
    fornecedores: list[CotacaoFornecedorDTO]
    menor_valor: str
    vencedor: str


class MapaCotacaoDTO(BaseModel):
    id: str
    titulo: str
    data: str
    solicitante: str
    departamento: str
    status: str
    tag_equipamento: str
    prazo_entrega: str | None
    itens: list[ItemCotacaoDTO]
    total_melhores_precos: str

    @classmethod
    def from_domain(cls, m: MapaCotacao) -> MapaCotacaoDTO:
        return cls(
            id=m.id,
            titulo=m.titulo,
            data=m.data.isoformat(),
            solicitante=m.solicitante,
            departamento=m.departamento,
            status=m.status.value,
            tag_equipamento=m.tag_equipamento,
            prazo_entrega=m.prazo_entrega.isoformat() if m.prazo_entrega else None,
            itens=[
                ItemCotacaoDTO(
                    id=it.id,
                    codigo=it.codigo,
                    part_number=it.part_number,
                    descricao=it.descricao,
                    unidade=it.unidade,
                    quantidade=it.quantidade,
                    fornecedores=[
                        CotacaoFornecedorDTO(
                            id=f.id,
                            nome=f.nome,
                            marca=f.marca,
                            valor_unit=str(f.valor_unit),
                            difal=str(f.difal),
                            total=str(f.total),
                        )
                        for f in it.fornecedores
                    ],
                    menor_valor=str(it.menor_valor),
                    vencedor=it.vencedor,
                )
                for it in m.itens
            ],
            total_melhores_precos=str(m.total_melhores_precos),
        )


class MapaResumoDTO(BaseModel):
    id: str
    titulo: str
    data: str
    status: str
    quantidade_itens: int
    total_melhores_precos: str

    @classmethod
    def from_domain(cls, m: MapaCotacao) -> MapaResumoDTO:
        return cls(
            id=m.id,
            titulo=m.titulo,
            data=m.data.isoformat(),
            status=m.status.value,
            quantidade_itens=len(m.itens),
            total_melhores_precos=str(m.total_melhores_precos),
        )


class MapaCabecalhoDTO(BaseModel):
    titulo: str | None = None
    solicitante: str | None = None
    departamento: str | None = None
    status: StatusCotacao | None = None
    tag_equipamento: str | None = None
    data: date | None = None
    prazo_entrega: date | None = None


class ItemEdicaoDTO(BaseModel):
    descricao: str | None = None
    part_number: str | None = None
    unidade: str | None = None
    quantidade: ValorEntrada = None


class CotacaoEdicaoDTO(BaseModel):
    valor_unit: ValorEntrada = None
    difal: ValorEntrada = None
    marca: str | None = None


class FornecedorNomeDTO(BaseModel):
    nome: str
