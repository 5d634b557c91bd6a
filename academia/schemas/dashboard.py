# -*- coding: utf-8 -*-
"""
Schemas Pydantic do painel (KPIs e radar de cobrança).
"""
from typing import List
from pydantic import BaseModel

from academia.schemas.aluno import AlunoRead
from academia.schemas.transacao import TransacaoRead
from academia.vencimentos import SituacaoVencimento


class KPIRead(BaseModel):
    alunos_ativos: int
    a_receber_hoje: float
    saldo_mensal: float


class ItemRadar(BaseModel):
    aluno: AlunoRead
    situacao: SituacaoVencimento
    dias: int
    rotulo: str
    link_lembrete: str


class DashboardRead(BaseModel):
    kpi: KPIRead
    radar: List[ItemRadar] = []
    transacoes_recentes: List[TransacaoRead] = []
