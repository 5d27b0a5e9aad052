from __future__ import annotations

import csv
import io

from pydantic import TypeAdapter

from suprimentos.domain.cotacao.entities import MapaCotacao
from suprimentos.domain.pedido.entities import Pedido

from ..dtos.cotacao_dto import MapaCotacaoDTO
from ..dtos.pedido_dto import PedidoDTO

_PEDIDOS_ADAPTER = TypeAdapter(list[PedidoDTO])


class ExportService:
    def exportar_pedidos_json(self, pedidos: list[Pedido]) -> str:
        dtos = [PedidoDTO.from_domain(p) for p in pedidos]
        return _PEDIDOS_ADAPTER.dump_json(dtos, indent=2).decode()

    def exportar_pedidos_csv(self, pedidos: list[Pedido]) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["SC", "PD", "NF", "Fornecedor", "Prev. Entrega", "Valor", "Status", "Prioridade", "Parcelas"])
        for p in pedidos:
            writer.writerow(
                [
                    p.solicitacao_no,
                    p.pedido_no,
                    p.nf_no,
                    p.fornecedor,
                    p.previsao_entrega.isoformat() if p.previsao_entrega else "",
                    p.valor,
                    p.status.value,
                    p.prioridade.value,
                    len(p.parcelas),
                ]
            )
        return output.getvalue()

    def exportar_mapa_json(self, mapa: MapaCotacao) -> str:
        return MapaCotacaoDTO.from_domain(mapa).model_dump_json(indent=2)

    def exportar_mapa_csv(self, mapa: MapaCotacao) -> str:
        output = io.StringIO()

        output.write(f"# MAPA {mapa.id}\n")
        writer = csv.writer(output)
        writer.writerow(["Campo", "Valor"])
        writer.writerow(["Titulo", mapa.titulo])
        writer.writerow(["Status", mapa.status.value])
        writer.writerow(["Data", mapa.data.isoformat()])
        writer.writerow(["Tag", mapa.tag_equipamento])
        writer.writerow(["Prazo Entrega", mapa.prazo_entrega.isoformat() if mapa.prazo_entrega else ""])
        output.write("\n")

        output.write("# ITENS\n")
        cabecalho = ["Codigo", "Descricao", "PN", "Unidade", "Qtd"]
        for f in mapa.fornecedores:
            cabecalho.extend([f"{f.nome} Unit", f"{f.nome} DIFAL", f"{f.nome} Total"])
        cabecalho.extend(["Menor Valor", "Vencedor"])
        writer.writerow(cabecalho)
        for it in mapa.itens:
            linha: list[object] = [it.codigo, it.descricao, it.part_number, it.unidade, it.quantidade]
            for f in it.fornecedores:
                linha.extend([f.valor_unit, f.difal, f.total])
            linha.extend([it.menor_valor, it.vencedor])
            writer.writerow(linha)
        output.write("\n")

        writer.writerow(["Total Melhores Precos", mapa.total_melhores_precos])
        return output.getvalue()
