from collections.abc import Callable

from fastapi import APIRouter, Depends, HTTPException, Response

from suprimentos.application.dtos.cotacao_dto import (
    CotacaoEdicaoDTO,
    FornecedorNomeDTO,
    ItemEdicaoDTO,
    MapaCabecalhoDTO,
    MapaCotacaoDTO,
    MapaResumoDTO,
)
from suprimentos.application.services.cotacao_service import CotacaoService
from suprimentos.domain.cotacao.entities import MapaCotacao
from suprimentos.interfaces.api.dependencies import get_cotacao_service

router = APIRouter()


def _executar(operacao: Callable[[], MapaCotacao]) -> MapaCotacaoDTO:
    try:
        return MapaCotacaoDTO.from_domain(operacao())
    except LookupError as err:
        raise HTTPException(status_code=404, detail=f"Nao encontrado: {err}") from err


@router.get("/cotacoes", response_model=list[MapaResumoDTO])
def get_cotacoes(
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> list[MapaResumoDTO]:
    return [MapaResumoDTO.from_domain(m) for m in service.listar()]


@router.post("/cotacoes", response_model=MapaCotacaoDTO, status_code=201)
def criar_cotacao(
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> MapaCotacaoDTO:
    return MapaCotacaoDTO.from_domain(service.criar())


@router.get("/cotacoes/{mapa_id}", response_model=MapaCotacaoDTO)
def get_cotacao(
    mapa_id: str,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> MapaCotacaoDTO:
    return _executar(lambda: service.obter(mapa_id))


@router.patch("/cotacoes/{mapa_id}", response_model=MapaCotacaoDTO)
def atualizar_cabecalho(
    mapa_id: str,
    dados: MapaCabecalhoDTO,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> MapaCotacaoDTO:
    return _executar(lambda: service.atualizar_cabecalho(mapa_id, dados))


@router.delete("/cotacoes/{mapa_id}", status_code=204)
def excluir_cotacao(
    mapa_id: str,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> Response:
    try:
        service.excluir(mapa_id)
    except LookupError as err:
        raise HTTPException(status_code=404, detail="Mapa nao encontrado") from err
    return Response(status_code=204)


@router.post("/cotacoes/{mapa_id}/itens", response_model=MapaCotacaoDTO)
def adicionar_item(
    mapa_id: str,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> MapaCotacaoDTO:
    return _executar(lambda: service.adicionar_item(mapa_id))


@router.patch("/cotacoes/{mapa_id}/itens/{item_id}", response_model=MapaCotacaoDTO)
def atualizar_item(
    mapa_id: str,
    item_id: str,
    dados: ItemEdicaoDTO,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> MapaCotacaoDTO:
    return _executar(lambda: service.atualizar_item(mapa_id, item_id, dados))


@router.delete("/cotacoes/{mapa_id}/itens/{item_id}", response_model=MapaCotacaoDTO)
def remover_item(
    mapa_id: str,
    item_id: str,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> MapaCotacaoDTO:
    return _executar(lambda: service.remover_item(mapa_id, item_id))


@router.patch(
    "/cotacoes/{mapa_id}/itens/{item_id}/fornecedores/{fornecedor_id}",
    response_model=MapaCotacaoDTO,
)
def atualizar_cotacao_fornecedor(
    mapa_id: str,
    item_id: str,
    fornecedor_id: str,
    dados: CotacaoEdicaoDTO,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> MapaCotacaoDTO:
    return _executar(lambda: service.atualizar_cotacao(mapa_id, item_id, fornecedor_id, dados))


@router.post("/cotacoes/{mapa_id}/fornecedores", response_model=MapaCotacaoDTO)
def adicionar_fornecedor(
    mapa_id: str,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> MapaCotacaoDTO:
    return _executar(lambda: service.adicionar_fornecedor(mapa_id))


@router.patch("/cotacoes/{mapa_id}/fornecedores/{fornecedor_id}", response_model=MapaCotacaoDTO)
def renomear_fornecedor(
    mapa_id: str,
    fornecedor_id: str,
    dados: FornecedorNomeDTO,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> MapaCotacaoDTO:
    return _executar(lambda: service.renomear_fornecedor(mapa_id, fornecedor_id, dados.nome))


@router.delete("/cotacoes/{mapa_id}/fornecedores/{fornecedor_id}", response_model=MapaCotacaoDTO)
def remover_fornecedor(
    mapa_id: str,
    fornecedor_id: str,
    service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
) -> MapaCotacaoDTO:
    return _executar(lambda: service.remover_fornecedor(mapa_id, fornecedor_id))
