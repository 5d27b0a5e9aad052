from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from suprimentos.infrastructure.config import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from suprimentos.infrastructure.duckdb_connection import get_connection
    get_connection()  # cria o schema no startup
    yield


app = FastAPI(
    title="Gestao de Suprimentos API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
)

# Routers: export ANTES de pedido/cotacao (path conflict: /pedidos/export vs /pedidos/{pedido_id})
from suprimentos.interfaces.api.routes.cotacao_routes import router as cotacao_router  # noqa: E402
from suprimentos.interfaces.api.routes.export_routes import router as export_router  # noqa: E402
from suprimentos.interfaces.api.routes.pedido_routes import router as pedido_router  # noqa: E402
from suprimentos.interfaces.api.routes.relatorio_routes import router as relatorio_router  # noqa: E402
from suprimentos.interfaces.api.routes.resumo_routes import router as resumo_router  # noqa: E402

app.include_router(export_router, prefix="/api")
app.include_router(pedido_router, prefix="/api")
app.include_router(cotacao_router, prefix="/api")
app.include_router(relatorio_router, prefix="/api")
app.include_router(resumo_router, prefix="/api")
