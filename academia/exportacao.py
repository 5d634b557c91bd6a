# -*- coding: utf-8 -*-
"""
Exportação do financeiro em CSV no formato que o Excel em português abre
direto: separador ';', vírgula decimal, datas DD/MM/AAAA e BOM UTF-8.
"""
import csv
import io
from datetime import date

from academia.vencimentos import formatar_data

BOM = "\ufeff"
CABECALHO = ["Data", "Tipo", "Categoria", "Descrição", "Valor", "Forma Pagamento"]


def filtrar_por_mes(transacoes, mes: str):
    """``mes`` no formato AAAA-MM."""
    return [t for t in transacoes if t.data.isoformat().startswith(mes)]


def filtrar_por_periodo(transacoes, inicio: date, fim: date):
    return [t for t in transacoes if inicio <= t.data <= fim]


def formatar_valor(valor: float) -> str:
    return f"{valor:.2f}".replace(".", ",")


def gerar_csv(transacoes) -> str:
    """
    Gera o relatório em ordem crescente de data, independente da ordem
    recebida (a listagem da tela é decrescente).
    """
    saida = io.StringIO()
    saida.write(BOM)
    writer = csv.writer(saida, delimiter=";", lineterminator="\n")
    writer.writerow(CABECALHO)
    for t in sorted(transacoes, key=lambda t: t.data):
        writer.writerow([
            formatar_data(t.data),
            t.tipo.value,
            t.categoria,
            # ';' na descrição quebraria as colunas
            (t.descricao or "").replace(";", " "),
            formatar_valor(t.valor),
            t.forma_pagamento or "",
        ])
    return saida.getvalue()


def nome_arquivo(mes=None, inicio=None, fim=None) -> str:
    if mes:
        return f"relatorio_{mes}.csv"
    return f"relatorio_{inicio.isoformat()}_ate_{fim.isoformat()}.csv"
