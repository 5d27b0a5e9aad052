from fastapi import APIRouter, Depends, HTTPException, Query, Response

from suprimentos.application.dtos.pedido_dto import (
    ParcelaDTO,
    ParcelaEdicaoDTO,
    PedidoDTO,
    PedidoFormDTO,
    SimulacaoParcelasDTO,
)
from suprimentos.application.services.pedido_service import (
    ExclusaoNaoConfirmada,
    PedidoService,
)
from suprimentos.interfaces.api.dependencies import get_pedido_service

router = APIRouter()


@router.get("/pedidos", response_model=list[PedidoDTO])
def get_pedidos(
    arquivados: bool = False,
    busca: str = "",
    service: PedidoService = Depends(get_pedido_service),  # noqa: B008
) -> list[PedidoDTO]:
    return [PedidoDTO.from_domain(p) for p in service.listar(arquivados=arquivados, busca=busca)]


@router.post("/pedidos", response_model=PedidoDTO, status_code=201)
def criar_pedido(
    form: PedidoFormDTO,
    service: PedidoService = Depends(get_pedido_service),  # noqa: B008
) -> PedidoDTO:
    try:
        pedido = service.criar(form)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    return PedidoDTO.from_domain(pedido)


@router.post("/parcelamento/simulacao", response_model=list[ParcelaDTO])
def simular_parcelas(
    dados: SimulacaoParcelasDTO,
    service: PedidoService = Depends(get_pedido_service),  # noqa: B008
) -> list[ParcelaDTO]:
    try:
        parcelas = service.simular_parcelas(dados)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    return [
        ParcelaDTO(numero=p.numero, vencimento=p.vencimento.isoformat(), valor=str(p.valor), paga=p.paga)
        for p in parcelas
    ]


@router.get("/pedidos/{pedido_id}", response_model=PedidoDTO)
def get_pedido(
    pedido_id: str,
    service: PedidoService = Depends(get_pedido_service),  # noqa: B008
) -> PedidoDTO:
    try:
        return PedidoDTO.from_domain(service.obter(pedido_id))
    except LookupError as err:
        raise HTTPException(status_code=404, detail="Pedido nao encontrado") from err


@router.put("/pedidos/{pedido_id}", response_model=PedidoDTO)
def atualizar_pedido(
    pedido_id: str,
    form: PedidoFormDTO,
    service: PedidoService = Depends(get_pedido_service),  # noqa: B008
) -> PedidoDTO:
    try:
        return PedidoDTO.from_domain(service.atualizar(pedido_id, form))
    except LookupError as err:
        raise HTTPException(status_code=404, detail="Pedido nao encontrado") from err
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err


@router.patch("/pedidos/{pedido_id}/parcelas/{numero}", response_model=PedidoDTO)
def editar_parcela(
    pedido_id: str,
    numero: int,
    edicao: ParcelaEdicaoDTO,
    service: PedidoService = Depends(get_pedido_service),  # noqa: B008
) -> PedidoDTO:
    try:
        return PedidoDTO.from_domain(service.editar_parcela(pedido_id, numero, edicao))
    except LookupError as err:
        raise HTTPException(status_code=404, detail="Pedido ou parcela nao encontrado") from err
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err


@router.post("/pedidos/{pedido_id}/arquivo", response_model=PedidoDTO)
def alternar_arquivo(
    pedido_id: str,
    service: PedidoService = Depends(get_pedido_service),  # noqa: B008
) -> PedidoDTO:
    try:
        return PedidoDTO.from_domain(service.alternar_arquivo(pedido_id))
    except LookupError as err:
        raise HTTPException(status_code=404, detail="Pedido nao encontrado") from err


@router.delete("/pedidos/{pedido_id}", status_code=204)
def excluir_pedido(
    pedido_id: str,
    confirmar: bool = Query(default=False),
    service: PedidoService = Depends(get_pedido_service),  # noqa: B008
) -> Response:
    try:
        service.excluir(pedido_id, confirmar=confirmar)
    except ExclusaoNaoConfirmada as err:
        raise HTTPException(status_code=409, detail="Excluir este registro permanentemente? Envie confirmar=true") from err
    except LookupError as err:
        raise HTTPException(status_code=404, detail="Pedido nao encontrado") from err
    return Response(status_code=204)
