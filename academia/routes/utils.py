# academia/routes/utils.py
"""
Dependências e helpers comuns às rotas.
"""
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from academia.database import get_db
from academia.resultado import TipoErro
from academia.store import SqlRecordStore

STATUS_POR_ERRO = {
    TipoErro.NAO_ENCONTRADO: status.HTTP_404_NOT_FOUND,
    TipoErro.PLANO_INVALIDO: status.HTTP_400_BAD_REQUEST,
    TipoErro.VALIDACAO: status.HTTP_400_BAD_REQUEST,
    TipoErro.NAO_AUTENTICADO: status.HTTP_401_UNAUTHORIZED,
    TipoErro.FALHA_REMOTA: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_store(db: Session = Depends(get_db)) -> SqlRecordStore:
    return SqlRecordStore(db)


def desembrulhar(resultado):
    """Devolve o valor de um ``Ok`` ou levanta a HTTPException do ``Err``."""
    if resultado.ok:
        return resultado.valor
    raise HTTPException(status_code=STATUS_POR_ERRO[resultado.tipo], detail=resultado.detalhe)
