# -*- coding: utf-8 -*-
"""
Matrícula, renovação e manutenção do cadastro de alunos.

Matrícula e renovação gravam duas coisas: o aluno (status e vencimento) e a
receita correspondente no financeiro. As duas escritas ficam dentro de uma
unidade de trabalho do store; se a receita falhar, o aluno volta ao estado
anterior.
"""
import logging
from typing import Optional

from academia import mapeamento
from academia.constantes import CATEGORIA_MATRICULA, CATEGORIA_RENOVACAO, HORARIOS_TREINO
from academia.mapeamento import ALUNOS, PLANOS, TRANSACOES
from academia.resultado import Err, Ok, TipoErro, operacao
from academia.schemas.aluno import (
    AlunoUpdate, HorarioRead, MatriculaCreate, RenovacaoCreate, RenovacaoRead, StatusAluno,
)
from academia.schemas.transacao import TipoTransacao
from academia.vencimentos import calcular_proximo_vencimento

logger = logging.getLogger(__name__)


def _buscar_plano(store, plano_id):
    if not plano_id:
        return None
    registro = store.buscar(PLANOS, plano_id)
    return mapeamento.para_schema(PLANOS, registro) if registro else None


def _buscar_aluno(store, aluno_id):
    registro = store.buscar(ALUNOS, aluno_id)
    return mapeamento.para_schema(ALUNOS, registro) if registro else None


def _nao_encontrado():
    return Err(TipoErro.NAO_ENCONTRADO, "Aluno não encontrado")


@operacao
def listar_alunos(sessao, store, status: Optional[StatusAluno] = None, busca: Optional[str] = None):
    alunos = [mapeamento.para_schema(ALUNOS, r) for r in store.listar(ALUNOS)]
    if status:
        alunos = [a for a in alunos if a.status == status]
    if busca:
        termo = busca.lower()
        alunos = [a for a in alunos if termo in a.nome.lower()]
    return Ok(alunos)


@operacao
def obter_aluno(sessao, store, aluno_id: str):
    aluno = _buscar_aluno(store, aluno_id)
    if aluno is None:
        return _nao_encontrado()
    return Ok(aluno)


@operacao
def matricular_aluno(sessao, store, dados: MatriculaCreate):
    """
    Cadastra o aluno já ativo, com vencimento em data do pagamento + duração
    do plano, e lança a primeira mensalidade como receita.
    """
    plano = _buscar_plano(store, dados.plano_id)
    if plano is None:
        return Err(TipoErro.PLANO_INVALIDO, "Plano inválido")

    proximo_vencimento = calcular_proximo_vencimento(dados.data_pagamento, plano.duracao_dias)

    with store.unidade_de_trabalho():
        registro = store.inserir(ALUNOS, mapeamento.para_store(ALUNOS, {
            "nome": dados.nome,
            "whatsapp": dados.whatsapp,
            "plano_id": plano.id,
            "data_matricula": dados.data_pagamento,
            "proximo_vencimento": proximo_vencimento,
            "status": StatusAluno.ATIVO,
            "horario_treino": dados.horario_treino,
        }))
        aluno = mapeamento.para_schema(ALUNOS, registro)

        store.inserir(TRANSACOES, mapeamento.para_store(TRANSACOES, {
            "data": dados.data_pagamento,
            "tipo": TipoTransacao.RECEITA,
            "categoria": CATEGORIA_MATRICULA,
            "valor": plano.valor,
            "descricao": f"Matrícula: {dados.nome} ({plano.nome})",
            "aluno_id": aluno.id,
            "forma_pagamento": dados.forma_pagamento,
            "data_competencia": dados.data_pagamento,
        }))

    logger.info("Matrícula de %s no plano %s (vence %s) por %s",
                aluno.nome, plano.nome, proximo_vencimento, sessao.email)
    return Ok(aluno)


@operacao
def renovar_aluno(sessao, store, aluno_id: str, dados: RenovacaoCreate):
    """
    Registra um novo pagamento: recalcula o vencimento a partir da data de
    competência (ou do pagamento), reativa o aluno e lança a receita.
    """
    aluno = _buscar_aluno(store, aluno_id)
    if aluno is None:
        return _nao_encontrado()

    troca_plano = bool(dados.novo_plano_id) and dados.novo_plano_id != aluno.plano_id
    plano = _buscar_plano(store, dados.novo_plano_id if troca_plano else aluno.plano_id)
    if plano is None:
        return Err(TipoErro.PLANO_INVALIDO, "Plano não encontrado")

    data_base = dados.data_competencia or dados.data_pagamento
    novo_vencimento = calcular_proximo_vencimento(data_base, plano.duracao_dias)

    alteracoes = {
        "status": StatusAluno.ATIVO,
        "proximo_vencimento": novo_vencimento,
    }
    if troca_plano:
        alteracoes["plano_id"] = plano.id

    with store.unidade_de_trabalho():
        if store.atualizar(ALUNOS, aluno.id, mapeamento.para_store(ALUNOS, alteracoes)) is None:
            return _nao_encontrado()

        store.inserir(TRANSACOES, mapeamento.para_store(TRANSACOES, {
            "data": dados.data_pagamento,
            "tipo": TipoTransacao.RECEITA,
            "categoria": CATEGORIA_RENOVACAO,
            "valor": plano.valor,
            "descricao": f"Renovação: {aluno.nome} ({plano.nome})",
            "aluno_id": aluno.id,
            "forma_pagamento": dados.forma_pagamento,
            "data_competencia": data_base,
        }))

    logger.info("Renovação de %s no plano %s (vence %s) por %s",
                aluno.nome, plano.nome, novo_vencimento, sessao.email)
    return Ok(RenovacaoRead(
        aluno_id=aluno.id,
        proximo_vencimento=novo_vencimento,
        valor=plano.valor,
        plano_nome=plano.nome,
    ))


@operacao
def definir_status_aluno(sessao, store, aluno_id: str, novo_status: StatusAluno):
    # Escrita incondicional; não mexe no financeiro
    registro = store.atualizar(ALUNOS, aluno_id, mapeamento.para_store(ALUNOS, {"status": novo_status}))
    if registro is None:
        return _nao_encontrado()
    logger.info("Status do aluno %s alterado para %s por %s", aluno_id, novo_status.value, sessao.email)
    return Ok(mapeamento.para_schema(ALUNOS, registro))


@operacao
def atualizar_aluno(sessao, store, aluno_id: str, dados: AlunoUpdate):
    alteracoes = dados.dict(exclude_unset=True)
    if not alteracoes:
        aluno = _buscar_aluno(store, aluno_id)
        return Ok(aluno) if aluno else _nao_encontrado()
    registro = store.atualizar(ALUNOS, aluno_id, mapeamento.para_store(ALUNOS, alteracoes))
    if registro is None:
        return _nao_encontrado()
    return Ok(mapeamento.para_schema(ALUNOS, registro))


@operacao
def excluir_aluno(sessao, store, aluno_id: str):
    # As transações do aluno continuam no financeiro
    if not store.excluir(ALUNOS, aluno_id):
        return _nao_encontrado()
    logger.info("Aluno %s excluído por %s", aluno_id, sessao.email)
    return Ok()


def agrupar_por_horario(alunos):
    """Grade 05:00-21:00 com os alunos ativos de cada horário, por nome."""
    grade = []
    for horario in HORARIOS_TREINO:
        do_horario = [
            a for a in alunos
            if a.horario_treino == horario and a.status == StatusAluno.ATIVO
        ]
        grade.append(HorarioRead(horario=horario, alunos=sorted(do_horario, key=lambda a: a.nome.lower())))
    return grade
