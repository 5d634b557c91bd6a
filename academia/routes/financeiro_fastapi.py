# academia/routes/financeiro_fastapi.py
# -*- coding: utf-8 -*-
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Response, status

from academia.auth import Sessao, get_sessao
from academia.constantes import CATEGORIAS_DESPESA, CATEGORIAS_RECEITA, FORMAS_PAGAMENTO
from academia.routes.utils import desembrulhar, get_store
from academia.schemas.transacao import CategoriasRead, ResumoMensalRead, TransacaoCreate, TransacaoRead
from academia.servicos import financeiro as servico
from academia.store import RecordStore

router = APIRouter(
    tags=["Financeiro"],
    responses={404: {"description": "Não encontrado"}},
)


@router.get("/categorias", response_model=CategoriasRead)
def get_categorias(sessao: Sessao = Depends(get_sessao)):
    """Categorias de receita/despesa e formas de pagamento para os formulários."""
    return CategoriasRead(
        receita=CATEGORIAS_RECEITA,
        despesa=CATEGORIAS_DESPESA,
        formas_pagamento=FORMAS_PAGAMENTO,
    )

# --- CRUD Endpoints ---

@router.post("/transacoes", response_model=TransacaoRead, status_code=status.HTTP_201_CREATED)
def create_transacao(transacao: TransacaoCreate, sessao: Sessao = Depends(get_sessao),
                     store: RecordStore = Depends(get_store)):
    return desembrulhar(servico.adicionar_transacao(sessao, store, transacao))


@router.get("/transacoes", response_model=List[TransacaoRead])
def read_transacoes(mes: Optional[str] = None, sessao: Sessao = Depends(get_sessao),
                    store: RecordStore = Depends(get_store)):
    """Livro caixa completo ou só do mês ``mes=AAAA-MM``."""
    return desembrulhar(servico.listar_transacoes(sessao, store, mes=mes))


@router.get("/resumo", response_model=ResumoMensalRead)
def read_resumo(mes: str, sessao: Sessao = Depends(get_sessao), store: RecordStore = Depends(get_store)):
    return desembrulhar(servico.resumo_mensal(sessao, store, mes))


@router.delete("/transacoes/{transacao_id}", status_code=204)
def delete_transacao(transacao_id: str, sessao: Sessao = Depends(get_sessao),
                     store: RecordStore = Depends(get_store)):
    desembrulhar(servico.excluir_transacao(sessao, store, transacao_id))


# --- EXPORTAÇÃO CSV ---
@router.get("/exportar")
def exportar_transacoes(
    mes: Optional[str] = None,
    data_inicio: Optional[date] = None,
    data_fim: Optional[date] = None,
    sessao: Sessao = Depends(get_sessao),
    store: RecordStore = Depends(get_store),
):
    """
    Baixa o relatório CSV de um mês (``mes=AAAA-MM``) ou de um período
    (``data_inicio`` e ``data_fim``).
    """
    nome, conteudo = desembrulhar(servico.exportar_csv(sessao, store, mes=mes, inicio=data_inicio, fim=data_fim))
    return Response(
        content=conteudo.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{nome}"'},
    )
