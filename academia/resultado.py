# -*- coding: utf-8 -*-
"""
Resultado das operações de negócio: ``Ok(valor)`` ou ``Err(tipo, detalhe)``.

Os serviços nunca lançam exceção para o chamador; quem decide o que fazer
com um ``Err`` (resposta HTTP, mensagem na tela) é a camada de apresentação.
"""
import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from academia.store import ErroStore

logger = logging.getLogger(__name__)


class TipoErro(str, Enum):
    NAO_ENCONTRADO = "NotFound"
    PLANO_INVALIDO = "InvalidPlan"
    FALHA_REMOTA = "RemoteFailure"
    VALIDACAO = "ValidationFailure"
    NAO_AUTENTICADO = "Unauthenticated"


@dataclass(frozen=True)
class Ok:
    valor: Any = None
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Err:
    tipo: TipoErro
    detalhe: str
    ok: ClassVar[bool] = False


def operacao(func):
    """
    Decorador dos serviços. O primeiro argumento é sempre a ``Sessao``
    do usuário: sem sessão válida a operação nem começa. Falhas do banco
    viram ``Err(FALHA_REMOTA)``.
    """
    @functools.wraps(func)
    def wrapper(sessao, *args, **kwargs):
        if sessao is None or sessao.expirada():
            return Err(TipoErro.NAO_AUTENTICADO, "Sessão expirada. Faça login novamente.")
        try:
            return func(sessao, *args, **kwargs)
        except ErroStore as e:
            logger.exception("Falha no banco em %s (usuário %s)", func.__name__, sessao.email)
            return Err(TipoErro.FALHA_REMOTA, f"Erro ao acessar o banco de dados: {e}")
    return wrapper
