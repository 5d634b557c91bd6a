# -*- coding: utf-8 -*-
"""
Dados do painel: KPIs, radar de cobrança e últimas transações.
"""
from academia import mapeamento
from academia.mapeamento import ALUNOS, PLANOS, TRANSACOES
from academia.radar import calcular_kpi, montar_itens_radar
from academia.resultado import Ok, operacao
from academia.schemas.dashboard import DashboardRead


@operacao
def carregar_dashboard(sessao, store, hoje):
    # Leituras em sequência; volume pequeno, sem agregação no banco
    alunos = [mapeamento.para_schema(ALUNOS, r) for r in store.listar(ALUNOS)]
    planos = [mapeamento.para_schema(PLANOS, r) for r in store.listar(PLANOS)]
    transacoes = [mapeamento.para_schema(TRANSACOES, r) for r in store.listar(TRANSACOES)]

    return Ok(DashboardRead(
        kpi=calcular_kpi(alunos, planos, transacoes, hoje),
        radar=montar_itens_radar(alunos, hoje),
        transacoes_recentes=transacoes[:5],
    ))
