# -*- coding: utf-8 -*-
"""
Livro caixa: lançamentos manuais, exclusão e exportação em CSV.
"""
import logging
import re
from datetime import date
from typing import Optional

from academia import exportacao, mapeamento
from academia.mapeamento import TRANSACOES
from academia.resultado import Err, Ok, TipoErro, operacao
from academia.radar import somar_por_tipo
from academia.schemas.transacao import ResumoMensalRead, TransacaoCreate

logger = logging.getLogger(__name__)


MES_INVALIDO = "Mês inválido. Use o formato AAAA-MM."


def _transacoes(store):
    return [mapeamento.para_schema(TRANSACOES, r) for r in store.listar(TRANSACOES)]


def _mes_valido(mes: str) -> bool:
    return re.fullmatch(r"\d{4}-(0[1-9]|1[0-2])", mes) is not None


@operacao
def listar_transacoes(sessao, store, mes: Optional[str] = None):
    """Transações da mais recente para a mais antiga, opcionalmente só de um mês (AAAA-MM)."""
    transacoes = _transacoes(store)
    if mes:
        if not _mes_valido(mes):
            return Err(TipoErro.VALIDACAO, MES_INVALIDO)
        transacoes = exportacao.filtrar_por_mes(transacoes, mes)
    return Ok(transacoes)


@operacao
def resumo_mensal(sessao, store, mes: str):
    """Receitas, despesas e saldo do mês; mês sem lançamentos dá tudo zero."""
    if not _mes_valido(mes):
        return Err(TipoErro.VALIDACAO, MES_INVALIDO)
    receitas, despesas = somar_por_tipo(exportacao.filtrar_por_mes(_transacoes(store), mes))
    return Ok(ResumoMensalRead(mes=mes, receitas=receitas, despesas=despesas, saldo=receitas - despesas))


@operacao
def adicionar_transacao(sessao, store, dados: TransacaoCreate):
    campos = dados.dict()
    if campos["data_competencia"] is None:
        campos["data_competencia"] = campos["data"]
    registro = store.inserir(TRANSACOES, mapeamento.para_store(TRANSACOES, campos))
    logger.info("Transação %s/%s de %.2f lançada por %s",
                dados.tipo.value, dados.categoria, dados.valor, sessao.email)
    return Ok(mapeamento.para_schema(TRANSACOES, registro))


@operacao
def excluir_transacao(sessao, store, transacao_id: str):
    if not store.excluir(TRANSACOES, transacao_id):
        return Err(TipoErro.NAO_ENCONTRADO, "Transação não encontrada")
    logger.info("Transação %s excluída por %s", transacao_id, sessao.email)
    return Ok()


@operacao
def exportar_csv(sessao, store, mes: Optional[str] = None,
                 inicio: Optional[date] = None, fim: Optional[date] = None):
    """
    Exporta as transações de um mês (AAAA-MM) ou de um período fechado.
    Retorna ``Ok((nome_arquivo, conteudo))``.
    """
    if mes:
        if not _mes_valido(mes):
            return Err(TipoErro.VALIDACAO, MES_INVALIDO)
        selecionadas = exportacao.filtrar_por_mes(_transacoes(store), mes)
    else:
        if not inicio or not fim:
            return Err(TipoErro.VALIDACAO, "Por favor, selecione as datas de início e fim.")
        selecionadas = exportacao.filtrar_por_periodo(_transacoes(store), inicio, fim)

    if not selecionadas:
        return Err(TipoErro.VALIDACAO, "Nenhuma transação encontrada para o período selecionado.")

    return Ok((exportacao.nome_arquivo(mes, inicio, fim), exportacao.gerar_csv(selecionadas)))
