# -*- coding: utf-8 -*-
"""
Rotas FastAPI para Alunos: matrícula, renovação, status e cadastro.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status

from academia.auth import Sessao, get_sessao
from academia.routes.utils import desembrulhar, get_store
from academia.schemas.aluno import (
    AlunoRead, AlunoUpdate, HorarioRead, MatriculaCreate, RenovacaoCreate, RenovacaoRead,
    StatusAluno, StatusUpdate,
)
from academia.servicos import alunos as servico
from academia.store import RecordStore

router = APIRouter(
    tags=["Alunos"],
    responses={404: {"description": "Aluno não encontrado"}},
)


@router.post("", response_model=AlunoRead, status_code=status.HTTP_201_CREATED)
def create_aluno(matricula: MatriculaCreate, sessao: Sessao = Depends(get_sessao),
                 store: RecordStore = Depends(get_store)):
    """
    Matricula um novo aluno e lança a primeira mensalidade no financeiro.
    """
    return desembrulhar(servico.matricular_aluno(sessao, store, matricula))


@router.get("", response_model=List[AlunoRead])
def read_alunos(
    status: Optional[StatusAluno] = None,
    busca: Optional[str] = None,
    sessao: Sessao = Depends(get_sessao),
    store: RecordStore = Depends(get_store),
):
    """
    Lista alunos com filtro opcional por status e busca por nome.
    """
    return desembrulhar(servico.listar_alunos(sessao, store, status=status, busca=busca))


@router.get("/horarios", response_model=List[HorarioRead])
def read_horarios(sessao: Sessao = Depends(get_sessao), store: RecordStore = Depends(get_store)):
    """
    Grade de horários de treino com os alunos ativos de cada faixa.
    """
    alunos = desembrulhar(servico.listar_alunos(sessao, store))
    return servico.agrupar_por_horario(alunos)


@router.get("/{aluno_id}", response_model=AlunoRead)
def read_aluno(aluno_id: str, sessao: Sessao = Depends(get_sessao), store: RecordStore = Depends(get_store)):
    return desembrulhar(servico.obter_aluno(sessao, store, aluno_id))


@router.put("/{aluno_id}", response_model=AlunoRead)
def update_aluno(aluno_id: str, aluno_update: AlunoUpdate, sessao: Sessao = Depends(get_sessao),
                 store: RecordStore = Depends(get_store)):
    """
    Atualiza nome, WhatsApp e horário de treino.
    """
    return desembrulhar(servico.atualizar_aluno(sessao, store, aluno_id, aluno_update))


@router.post("/{aluno_id}/renovar", response_model=RenovacaoRead)
def renovar_aluno(aluno_id: str, renovacao: RenovacaoCreate, sessao: Sessao = Depends(get_sessao),
                  store: RecordStore = Depends(get_store)):
    """
    Registra a renovação: novo vencimento, status Ativo e receita no financeiro.
    """
    return desembrulhar(servico.renovar_aluno(sessao, store, aluno_id, renovacao))


@router.put("/{aluno_id}/status", response_model=AlunoRead)
def update_status(aluno_id: str, dados: StatusUpdate, sessao: Sessao = Depends(get_sessao),
                  store: RecordStore = Depends(get_store)):
    return desembrulhar(servico.definir_status_aluno(sessao, store, aluno_id, dados.status))


@router.delete("/{aluno_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_aluno(aluno_id: str, sessao: Sessao = Depends(get_sessao), store: RecordStore = Depends(get_store)):
    desembrulhar(servico.excluir_aluno(sessao, store, aluno_id))
    return None
