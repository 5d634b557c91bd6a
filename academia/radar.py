# -*- coding: utf-8 -*-
"""
Radar de cobrança e indicadores do painel.

Tudo é recalculado a cada carga a partir das listas completas de alunos,
planos e transações (uma academia tem no máximo algumas centenas de alunos).
"""
import re
from datetime import timedelta
from urllib.parse import quote

from dateutil.relativedelta import relativedelta

from academia.constantes import JANELA_ALERTA_DIAS
from academia.schemas.aluno import StatusAluno
from academia.schemas.dashboard import ItemRadar, KPIRead
from academia.schemas.transacao import TipoTransacao
from academia.vencimentos import classificar_vencimento, descrever_vencimento


def calcular_radar(alunos, hoje, janela: int = JANELA_ALERTA_DIAS):
    """
    Alunos ativos vencidos, vencendo hoje ou nos próximos ``janela`` dias,
    do mais atrasado para o mais distante. ``sorted`` é estável, então
    empates mantêm a ordem de entrada.
    """
    limite = hoje + timedelta(days=janela)
    selecionados = [
        a for a in alunos
        if a.status == StatusAluno.ATIVO and a.proximo_vencimento <= limite
    ]
    return sorted(selecionados, key=lambda a: a.proximo_vencimento)


def _inicio_do_mes(hoje):
    return hoje.replace(day=1)


def somar_por_tipo(transacoes):
    """Retorna ``(receitas, despesas)`` das transações recebidas."""
    receitas = sum(t.valor for t in transacoes if t.tipo == TipoTransacao.RECEITA)
    despesas = sum(t.valor for t in transacoes if t.tipo == TipoTransacao.DESPESA)
    return receitas, despesas


def calcular_kpi(alunos, planos, transacoes, hoje) -> KPIRead:
    ativos = [a for a in alunos if a.status == StatusAluno.ATIVO]

    valores_planos = {p.id: p.valor for p in planos}
    a_receber_hoje = sum(
        valores_planos.get(a.plano_id, 0) for a in ativos if a.proximo_vencimento == hoje
    )

    # Mês de calendário de "hoje", não uma janela móvel de 30 dias
    inicio = _inicio_do_mes(hoje)
    fim = inicio + relativedelta(months=1)
    receitas, despesas = somar_por_tipo([t for t in transacoes if inicio <= t.data < fim])

    return KPIRead(
        alunos_ativos=len(ativos),
        a_receber_hoje=a_receber_hoje,
        saldo_mensal=receitas - despesas,
    )


def telefone_whatsapp(numero: str) -> str:
    digitos = re.sub(r"\D", "", numero or "")
    return digitos if digitos.startswith("55") else f"55{digitos}"


def link_whatsapp(numero: str) -> str:
    return f"https://wa.me/{telefone_whatsapp(numero)}"


def link_lembrete(aluno, hoje) -> str:
    """Link wa.me com a mensagem de lembrete de renovação já preenchida."""
    _, prefixo = descrever_vencimento(aluno.proximo_vencimento, hoje)
    mensagem = (
        f"Olá {aluno.nome}, {prefixo}. "
        "Vamos garantir sua renovação para continuar treinando sem pausas?"
    )
    return f"{link_whatsapp(aluno.whatsapp)}?text={quote(mensagem, safe='')}"


def montar_itens_radar(alunos, hoje):
    itens = []
    for aluno in calcular_radar(alunos, hoje):
        situacao, dias = classificar_vencimento(aluno.proximo_vencimento, hoje)
        rotulo, _ = descrever_vencimento(aluno.proximo_vencimento, hoje)
        itens.append(ItemRadar(
            aluno=aluno,
            situacao=situacao,
            dias=dias,
            rotulo=rotulo,
            link_lembrete=link_lembrete(aluno, hoje),
        ))
    return itens
