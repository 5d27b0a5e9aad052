from fastapi import APIRouter, Depends, HTTPException

from suprimentos.application.dtos.relatorio_dto import ResumoDTO
from suprimentos.application.services.resumo_service import ResumoService
from suprimentos.interfaces.api.dependencies import get_resumo_service

router = APIRouter()


@router.post("/resumos/pedidos", response_model=ResumoDTO)
def resumir_pedidos(
    service: ResumoService = Depends(get_resumo_service),  # noqa: B008
) -> ResumoDTO:
    return service.resumir_carteira()


@router.post("/cotacoes/{mapa_id}/analise", response_model=ResumoDTO)
def analisar_cotacao(
    mapa_id: str,
    service: ResumoService = Depends(get_resumo_service),  # noqa: B008
) -> ResumoDTO:
    try:
        return service.analisar_mapa(mapa_id)
    except LookupError as err:
        raise HTTPException(status_code=404, detail="Mapa nao encontrado") from err
