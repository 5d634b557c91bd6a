# -*- coding: utf-8 -*-
"""
Cadastro de planos.
"""
import logging
from typing import Optional, Union

from academia import mapeamento
from academia.mapeamento import PLANOS
from academia.resultado import Err, Ok, TipoErro, operacao
from academia.schemas.plano import PlanoCreate, PlanoUpdate

logger = logging.getLogger(__name__)


@operacao
def listar_planos(sessao, store):
    return Ok([mapeamento.para_schema(PLANOS, r) for r in store.listar(PLANOS)])


@operacao
def obter_plano(sessao, store, plano_id: str):
    registro = store.buscar(PLANOS, plano_id)
    if registro is None:
        return Err(TipoErro.NAO_ENCONTRADO, "Plano não encontrado")
    return Ok(mapeamento.para_schema(PLANOS, registro))


@operacao
def salvar_plano(sessao, store, dados: Union[PlanoCreate, PlanoUpdate], plano_id: Optional[str] = None):
    """Insere um plano novo ou, com ``plano_id``, atualiza o existente."""
    if plano_id is None:
        registro = store.inserir(PLANOS, mapeamento.para_store(PLANOS, dados.dict()))
        logger.info("Plano %s criado por %s", registro["name"], sessao.email)
    else:
        alteracoes = {k: v for k, v in dados.dict(exclude_unset=True).items() if v is not None}
        registro = store.atualizar(PLANOS, plano_id, mapeamento.para_store(PLANOS, alteracoes))
        if registro is None:
            return Err(TipoErro.NAO_ENCONTRADO, "Plano não encontrado")
        logger.info("Plano %s atualizado por %s", plano_id, sessao.email)
    return Ok(mapeamento.para_schema(PLANOS, registro))


@operacao
def excluir_plano(sessao, store, plano_id: str):
    # Alunos que usam o plano não impedem a exclusão
    if not store.excluir(PLANOS, plano_id):
        return Err(TipoErro.NAO_ENCONTRADO, "Plano não encontrado")
    logger.info("Plano %s excluído por %s", plano_id, sessao.email)
    return Ok()
