from collections.abc import Callable
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from suprimentos.application.services.cotacao_service import CotacaoService
from suprimentos.application.services.export_service import ExportService
from suprimentos.application.services.pedido_service import PedidoService
from suprimentos.interfaces.api.dependencies import (
    get_cotacao_service,
    get_export_service,
    get_pedido_service,
)

router = APIRouter()


def _pdf(gerar: Callable[[], bytes], nome: str) -> Response:
    try:
        pdf_bytes = gerar()
    except RuntimeError as err:
        raise HTTPException(status_code=501, detail=str(err)) from err
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={nome}.pdf"},
    )


@router.get("/pedidos/export")
def export_pedidos(
    formato: Literal["csv", "json", "pdf"] = Query(...),
    arquivados: bool = False,
    busca: str = "",
    pedido_service: PedidoService = Depends(get_pedido_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    pedidos = pedido_service.listar(arquivados=arquivados, busca=busca)

    if formato == "json":
        return Response(
            content=export_service.exportar_pedidos_json(pedidos),
            media_type="application/json",
        )
    if formato == "csv":
        return Response(
            content=export_service.exportar_pedidos_csv(pedidos),
            media_type="text/csv",
            headers={"Content-Disposition": "attachment; filename=fluxo_pedidos.csv"},
        )
    # pdf
    from suprimentos.infrastructure.pdf_generator import gerar_pdf_fluxo

    return _pdf(lambda: gerar_pdf_fluxo(pedidos), "fluxo_pedidos")


@router.get("/pedidos/{pedido_id}/export")
def export_pedido(
    pedido_id: str,
    formato: Literal["json", "pdf"] = Query(...),
    pedido_service: PedidoService = Depends(get_pedido_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    try:
        pedido = pedido_service.obter(pedido_id)
    except LookupError as err:
        raise HTTPException(status_code=404, detail="Pedido nao encontrado") from err

    if formato == "json":
        return Response(
            content=export_service.exportar_pedidos_json([pedido]),
            media_type="application/json",
        )
    # pdf
    from suprimentos.infrastructure.pdf_generator import gerar_pdf_pedido

    return _pdf(lambda: gerar_pdf_pedido(pedido), f"pedido_{pedido.solicitacao_no}")


@router.get("/cotacoes/{mapa_id}/export")
def export_cotacao(
    mapa_id: str,
    formato: Literal["csv", "json", "pdf"] = Query(...),
    cotacao_service: CotacaoService = Depends(get_cotacao_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    try:
        mapa = cotacao_service.obter(mapa_id)
    except LookupError as err:
        raise HTTPException(status_code=404, detail="Mapa nao encontrado") from err

    if formato == "json":
        return Response(
            content=export_service.exportar_mapa_json(mapa),
            media_type="application/json",
        )
    if formato == "csv":
        return Response(
            content=export_service.exportar_mapa_csv(mapa),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename=mapa_{mapa.id}.csv"},
        )
    # pdf
    from suprimentos.infrastructure.pdf_generator import gerar_pdf_mapa

    return _pdf(lambda: gerar_pdf_mapa(mapa), f"mapa_{mapa.id}")
