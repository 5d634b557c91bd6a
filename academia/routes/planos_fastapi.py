# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Planos.
"""

from typing import List
from fastapi import APIRouter, Depends, status

from academia.auth import Sessao, get_sessao
from academia.routes.utils import desembrulhar, get_store
from academia.schemas.plano import PlanoCreate, PlanoRead, PlanoUpdate
from academia.servicos import planos as servico
from academia.store import RecordStore

router = APIRouter(
    tags=["Planos"],
    responses={404: {"description": "Plano não encontrado"}},
)

# --- CRUD Endpoints ---

@router.post("", response_model=PlanoRead, status_code=status.HTTP_201_CREATED)
def create_plano(plano: PlanoCreate, sessao: Sessao = Depends(get_sessao),
                 store: RecordStore = Depends(get_store)):
    """
    Cria um novo plano.
    """
    return desembrulhar(servico.salvar_plano(sessao, store, plano))


@router.get("", response_model=List[PlanoRead])
def read_planos(sessao: Sessao = Depends(get_sessao), store: RecordStore = Depends(get_store)):
    """
    Lista os planos do mais barato para o mais caro.
    """
    return desembrulhar(servico.listar_planos(sessao, store))


@router.get("/{plano_id}", response_model=PlanoRead)
def read_plano(plano_id: str, sessao: Sessao = Depends(get_sessao), store: RecordStore = Depends(get_store)):
    return desembrulhar(servico.obter_plano(sessao, store, plano_id))


@router.put("/{plano_id}", response_model=PlanoRead)
def update_plano(plano_id: str, plano_update: PlanoUpdate, sessao: Sessao = Depends(get_sessao),
                 store: RecordStore = Depends(get_store)):
    """
    Atualiza os dados de um plano existente.
    """
    return desembrulhar(servico.salvar_plano(sessao, store, plano_update, plano_id=plano_id))


@router.delete("/{plano_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_plano(plano_id: str, sessao: Sessao = Depends(get_sessao), store: RecordStore = Depends(get_store)):
    """
    Exclui um plano. Alunos vinculados não bloqueiam a exclusão.
    """
    desembrulhar(servico.excluir_plano(sessao, store, plano_id))
    return None
