from suprimentos.application.services.cotacao_service import CotacaoService
from suprimentos.application.services.export_service import ExportService
from suprimentos.application.services.pedido_service import PedidoService
from suprimentos.application.services.relatorio_service import RelatorioService
from suprimentos.application.services.resumo_service import ResumoService
from suprimentos.infrastructure.config import get_settings
from suprimentos.infrastructure.duckdb_connection import get_connection
from suprimentos.infrastructure.gemini_resumidor import GeminiResumidor
from suprimentos.infrastructure.repositories.duckdb_cotacao_repo import DuckDBMapaCotacaoRepo
from suprimentos.infrastructure.repositories.duckdb_pedido_repo import DuckDBPedidoRepo


def get_pedido_service() -> PedidoService:
    return PedidoService(
        pedido_repo=DuckDBPedidoRepo(get_connection()),
        responsavel_padrao=get_settings().responsavel_padrao,
    )


def get_cotacao_service() -> CotacaoService:
    settings = get_settings()
    return CotacaoService(
        mapa_repo=DuckDBMapaCotacaoRepo(get_connection()),
        solicitante_padrao=settings.responsavel_padrao,
        departamento_padrao=settings.departamento_padrao,
    )


def get_relatorio_service() -> RelatorioService:
    return RelatorioService()


def get_export_service() -> ExportService:
    return ExportService()


def get_resumidor() -> GeminiResumidor:
    return GeminiResumidor(get_settings())


def get_resumo_service() -> ResumoService:
    return ResumoService(
        pedido_service=get_pedido_service(),
        cotacao_service=get_cotacao_service(),
        resumidor=get_resumidor(),
    )
