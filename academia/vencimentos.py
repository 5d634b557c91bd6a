# -*- coding: utf-8 -*-
"""
Cálculo de vencimentos.

Todas as datas são tratadas como datas de calendário (meia-noite local):
um ``datetime`` recebido é truncado para a data antes de qualquer conta,
o que elimina o deslocamento de fuso ao interpretar strings ``YYYY-MM-DD``.
"""
import math
from datetime import date, datetime, timedelta
from enum import Enum
from typing import NamedTuple

from academia.constantes import JANELA_ALERTA_DIAS


class SituacaoVencimento(str, Enum):
    VENCIDO = "Overdue"
    VENCE_HOJE = "DueToday"
    VENCE_EM_BREVE = "DueSoon"
    EM_DIA = "NotDue"


class Classificacao(NamedTuple):
    situacao: SituacaoVencimento
    dias: int  # vencimento - hoje; negativo quando vencido


def _meia_noite(valor) -> datetime:
    if isinstance(valor, datetime):
        valor = valor.date()
    if isinstance(valor, str):
        valor = date.fromisoformat(valor[:10])
    return datetime(valor.year, valor.month, valor.day)


def calcular_proximo_vencimento(data_base, duracao_dias: int) -> date:
    """Retorna ``data_base + duracao_dias`` dias de calendário."""
    if duracao_dias < 0:
        raise ValueError("A duração do plano não pode ser negativa.")
    return _meia_noite(data_base).date() + timedelta(days=duracao_dias)


def dias_ate(vencimento, hoje) -> int:
    diferenca = _meia_noite(vencimento) - _meia_noite(hoje)
    return math.ceil(diferenca.total_seconds() / 86400)


def classificar_vencimento(vencimento, hoje, janela: int = JANELA_ALERTA_DIAS) -> Classificacao:
    dias = dias_ate(vencimento, hoje)
    if dias < 0:
        return Classificacao(SituacaoVencimento.VENCIDO, dias)
    if dias == 0:
        return Classificacao(SituacaoVencimento.VENCE_HOJE, dias)
    if dias <= janela:
        return Classificacao(SituacaoVencimento.VENCE_EM_BREVE, dias)
    return Classificacao(SituacaoVencimento.EM_DIA, dias)


def formatar_data(valor) -> str:
    return _meia_noite(valor).strftime("%d/%m/%Y")


def descrever_vencimento(vencimento, hoje):
    """
    Retorna ``(rotulo, prefixo_mensagem)`` usados no radar e no lembrete
    de WhatsApp.
    """
    situacao, dias = classificar_vencimento(vencimento, hoje)
    if situacao == SituacaoVencimento.VENCIDO:
        return (
            f"Vencido há {abs(dias)} dias",
            f"seu plano venceu no dia {formatar_data(vencimento)}",
        )
    if situacao == SituacaoVencimento.VENCE_HOJE:
        return "Vence Hoje", "seu plano vence hoje"
    return (
        f"Vence em {dias} dias",
        f"lembrete: seu plano vence em {dias} dias ({formatar_data(vencimento)})",
    )
