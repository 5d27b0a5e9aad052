from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date

from suprimentos.domain.pedido.entities import Parcela, Pedido
from suprimentos.domain.pedido.parcelamento import gerar_parcelas
from suprimentos.domain.pedido.repository import PedidoRepository
from suprimentos.domain.pedido.value_objects import StatusAtraso
from suprimentos.domain.shared.value_objects import arredondar_centavos, para_decimal

from ..dtos.pedido_dto import ParcelaEdicaoDTO, PedidoFormDTO, SimulacaoParcelasDTO


class PedidoNaoEncontrado(LookupError):
    pass


class ParcelaNaoEncontrada(LookupError):
    pass


class ExclusaoNaoConfirmada(Exception):
    pass


class PedidoService:
    """Orquestra o repositorio e o parcelamento. Toda alteracao grava a colecao inteira."""

    def __init__(self, pedido_repo: PedidoRepository, responsavel_padrao: str = "") -> None:
        self._repo = pedido_repo
        self._responsavel_padrao = responsavel_padrao

    def listar(self, arquivados: bool = False, busca: str = "") -> list[Pedido]:
        return [p for p in self._repo.listar() if p.arquivado == arquivados and p.corresponde(busca)]

    def obter(self, pedido_id: str) -> Pedido:
        for p in self._repo.listar():
            if p.id == pedido_id:
                return p
        raise PedidoNaoEncontrado(pedido_id)

    def simular_parcelas(self, dados: SimulacaoParcelasDTO, hoje: date | None = None) -> tuple[Parcela, ...]:
        """Parcelas de um formulario ainda nao salvo. Nada e gravado."""
        return gerar_parcelas(
            para_decimal(dados.valor),
            max(1, dados.parcelas),
            dados.vencimento_nf or hoje or date.today(),
        )

    def criar(self, form: PedidoFormDTO, hoje: date | None = None) -> Pedido:
        """Novo pedido no topo da lista, com parcelas geradas a partir do valor."""
        hoje = hoje or date.today()
        valor = arredondar_centavos(para_decimal(form.valor))
        quantidade = max(1, form.parcelas)
        vencimento = form.vencimento_nf or hoje
        pedido = Pedido(
            id=uuid.uuid4().hex,
            solicitacao_no=form.solicitacao_no,
            pedido_no=form.pedido_no,
            nf_no=form.nf_no,
            fornecedor=form.fornecedor.upper(),
            valor=valor,
            data_solicitacao=form.data_solicitacao or hoje,
            vencimento_nf=vencimento,
            previsao_entrega=form.previsao_entrega,
            quantidade_parcelas=quantidade,
            prioridade=form.prioridade,
            status=form.status,
            responsavel=form.responsavel or self._responsavel_padrao,
            observacoes=form.observacoes,
            parcelas=gerar_parcelas(valor, quantidade, vencimento),
        )
        self._repo.salvar_todos([pedido, *self._repo.listar()])
        return pedido

    def atualizar(self, pedido_id: str, form: PedidoFormDTO) -> Pedido:
        """Substitui os dados do pedido. As parcelas gravadas sao mantidas como estao:
        um pedido existente nunca regenera parcelas, para nao perder datas e
        baixas editadas manualmente."""
        atual = self.obter(pedido_id)
        novo = replace(
            atual,
            solicitacao_no=form.solicitacao_no,
            pedido_no=form.pedido_no,
            nf_no=form.nf_no,
            fornecedor=form.fornecedor.upper(),
            valor=arredondar_centavos(para_decimal(form.valor)),
            data_solicitacao=form.data_solicitacao or atual.data_solicitacao,
            vencimento_nf=form.vencimento_nf or atual.vencimento_nf,
            previsao_entrega=form.previsao_entrega,
            quantidade_parcelas=max(1, form.parcelas),
            prioridade=form.prioridade,
            status=form.status,
            status_atraso=StatusAtraso.NO_PRAZO,
            responsavel=form.responsavel or atual.responsavel,
            observacoes=form.observacoes,
        )
        return self._substituir(novo)

    def editar_parcela(self, pedido_id: str, numero: int, edicao: ParcelaEdicaoDTO) -> Pedido:
        """Edita vencimento, valor ou baixa de uma parcela.

        Alterar o valor redefine o valor do pedido como a soma das parcelas.
        """
        atual = self.obter(pedido_id)
        if not any(p.numero == numero for p in atual.parcelas):
            raise ParcelaNaoEncontrada(f"{pedido_id}#{numero}")

        parcelas: list[Parcela] = []
        for p in atual.parcelas:
            if p.numero == numero:
                if edicao.vencimento is not None:
                    p = replace(p, vencimento=edicao.vencimento)
                if edicao.valor is not None:
                    p = replace(p, valor=arredondar_centavos(para_decimal(edicao.valor)))
                if edicao.paga is not None:
                    p = replace(p, paga=edicao.paga)
            parcelas.append(p)

        novo = replace(atual, parcelas=tuple(parcelas))
        if edicao.valor is not None:
            novo = replace(novo, valor=arredondar_centavos(novo.soma_parcelas))
        return self._substituir(novo)

    def alternar_arquivo(self, pedido_id: str) -> Pedido:
        atual = self.obter(pedido_id)
        return self._substituir(replace(atual, arquivado=not atual.arquivado))

    def excluir(self, pedido_id: str, confirmar: bool = False) -> None:
        """Exclusao permanente. Exige confirmacao explicita."""
        if not confirmar:
            raise ExclusaoNaoConfirmada(pedido_id)
        pedidos = self._repo.listar()
        restantes = [p for p in pedidos if p.id != pedido_id]
        if len(restantes) == len(pedidos):
            raise PedidoNaoEncontrado(pedido_id)
        self._repo.salvar_todos(restantes)

    def _substituir(self, pedido: Pedido) -> Pedido:
        self._repo.salvar_todos([pedido if p.id == pedido.id else p for p in self._repo.listar()])
        return pedido
