# -*- coding: utf-8 -*-
"""
Armazenamento de registros (planos, alunos e transações).

O contrato é propositalmente pequeno: listar, buscar, inserir, atualizar e
excluir linhas identificadas por um id opaco, mais uma unidade de trabalho
que agrupa escritas. As linhas trafegam como dicionários com os nomes de
coluna do banco; a conversão para o domínio é feita em academia.mapeamento.
"""
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from academia.mapeamento import ALUNOS, PLANOS, TRANSACOES
from academia.models.aluno import Aluno
from academia.models.plano import Plano
from academia.models.transacao import Transacao

logger = logging.getLogger(__name__)


class ErroStore(Exception):
    """Falha do banco ao executar uma operação."""


class RecordStore(ABC):

    @abstractmethod
    def listar(self, entidade: str) -> List[dict]:
        ...

    @abstractmethod
    def buscar(self, entidade: str, registro_id: str) -> Optional[dict]:
        ...

    @abstractmethod
    def inserir(self, entidade: str, colunas: dict) -> dict:
        ...

    @abstractmethod
    def atualizar(self, entidade: str, registro_id: str, colunas: dict) -> Optional[dict]:
        ...

    @abstractmethod
    def excluir(self, entidade: str, registro_id: str) -> bool:
        ...

    @abstractmethod
    def unidade_de_trabalho(self):
        """Context manager: as escritas dentro do bloco são confirmadas juntas ou nenhuma."""


MODELOS = {
    PLANOS: Plano,
    ALUNOS: Aluno,
    TRANSACOES: Transacao,
}

# Planos por valor crescente, transações da mais recente para a mais antiga
ORDENACAO = {
    PLANOS: Plano.value.asc(),
    TRANSACOES: Transacao.date.desc(),
}


class SqlRecordStore(RecordStore):

    def __init__(self, db: Session):
        self.db = db
        self._em_unidade = False

    @staticmethod
    def _linha(obj) -> dict:
        return {coluna.name: getattr(obj, coluna.name) for coluna in obj.__table__.columns}

    def _obter(self, entidade, registro_id):
        modelo = MODELOS[entidade]
        return self.db.query(modelo).filter(modelo.id == registro_id).first()

    def _confirmar(self):
        try:
            if self._em_unidade:
                self.db.flush()
            else:
                self.db.commit()
        except SQLAlchemyError as e:
            if not self._em_unidade:
                self.db.rollback()
            raise ErroStore(str(e)) from e

    def listar(self, entidade):
        query = self.db.query(MODELOS[entidade])
        if entidade in ORDENACAO:
            query = query.order_by(ORDENACAO[entidade])
        try:
            return [self._linha(obj) for obj in query.all()]
        except SQLAlchemyError as e:
            raise ErroStore(str(e)) from e

    def buscar(self, entidade, registro_id):
        try:
            obj = self._obter(entidade, registro_id)
        except SQLAlchemyError as e:
            raise ErroStore(str(e)) from e
        return self._linha(obj) if obj is not None else None

    def inserir(self, entidade, colunas):
        obj = MODELOS[entidade](**colunas)
        self.db.add(obj)
        self._confirmar()
        return self._linha(obj)

    def atualizar(self, entidade, registro_id, colunas):
        obj = self._obter(entidade, registro_id)
        if obj is None:
            return None
        for coluna, valor in colunas.items():
            setattr(obj, coluna, valor)
        self._confirmar()
        return self._linha(obj)

    def excluir(self, entidade, registro_id):
        obj = self._obter(entidade, registro_id)
        if obj is None:
            return False
        self.db.delete(obj)
        self._confirmar()
        return True

    @contextmanager
    def unidade_de_trabalho(self):
        if self._em_unidade:
            yield self
            return

        self._em_unidade = True
        try:
            yield self
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise ErroStore(str(e)) from e
        except Exception:
            logger.warning("Unidade de trabalho desfeita (rollback)")
            self.db.rollback()
            raise
        finally:
            self._em_unidade = False
