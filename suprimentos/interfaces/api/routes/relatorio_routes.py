from fastapi import APIRouter, Depends

from suprimentos.application.dtos.relatorio_dto import PainelDTO, RelatorioDTO
from suprimentos.application.services.pedido_service import PedidoService
from suprimentos.application.services.relatorio_service import RelatorioService
from suprimentos.interfaces.api.dependencies import get_pedido_service, get_relatorio_service

router = APIRouter()


@router.get("/painel", response_model=PainelDTO)
def get_painel(
    pedido_service: PedidoService = Depends(get_pedido_service),  # noqa: B008
    relatorio_service: RelatorioService = Depends(get_relatorio_service),  # noqa: B008
) -> PainelDTO:
    return relatorio_service.painel(pedido_service.listar())


@router.get("/relatorios", response_model=RelatorioDTO)
def get_relatorio(
    pedido_service: PedidoService = Depends(get_pedido_service),  # noqa: B008
    relatorio_service: RelatorioService = Depends(get_relatorio_service),  # noqa: B008
) -> RelatorioDTO:
    return relatorio_service.relatorio(pedido_service.listar())
